# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
def env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "yes"}
