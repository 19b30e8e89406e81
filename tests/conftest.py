# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import patch

from pytest import fixture

from cron_predicate.util.app_env import reset_app_env


@fixture(autouse=True)
def clean_environment() -> Iterator[None]:
    with patch.dict(environ, {}, clear=True):
        reset_app_env()
        yield
    reset_app_env()
