# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Optional

from cron_predicate.util.app_env_utils import env_to_bool

DEFAULT_SERVICE_NAME = "cron-predicate"


@dataclass(frozen=True)
class AppEnv:
    service_name: str
    enable_debug_logging: bool


# cached after the first read
_app_env: Optional[AppEnv] = None


def get_app_env() -> AppEnv:
    """
    Retrieve the library settings, reading the environment on first use only.

    The settings only configure logging. They are read when the first logger is
    created, which happens when the cron modules are imported. Every setting is optional
    and a blank service name falls back to the default.
    """
    global _app_env
    if not _app_env:
        _app_env = _from_environment()
    return _app_env


def reset_app_env() -> None:
    global _app_env
    _app_env = None


def _from_environment() -> AppEnv:
    service_name = environ.get(
        "CRON_PREDICATE_SERVICE_NAME", DEFAULT_SERVICE_NAME
    ).strip()

    return AppEnv(
        service_name=service_name or DEFAULT_SERVICE_NAME,
        enable_debug_logging=env_to_bool(
            environ.get("CRON_PREDICATE_DEBUG_LOGGING", "false")
        ),
    )
