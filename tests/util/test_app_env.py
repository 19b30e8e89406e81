# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from os import environ
from unittest.mock import patch

from cron_predicate.util.app_env import (
    DEFAULT_SERVICE_NAME,
    AppEnv,
    get_app_env,
    reset_app_env,
)


def test_defaults_when_environment_is_empty() -> None:
    assert get_app_env() == AppEnv(
        service_name=DEFAULT_SERVICE_NAME, enable_debug_logging=False
    )


def test_reads_settings_from_environment() -> None:
    env = {
        "CRON_PREDICATE_SERVICE_NAME": "nightly-jobs",
        "CRON_PREDICATE_DEBUG_LOGGING": "Yes",
    }
    with patch.dict(environ, env):
        assert get_app_env() == AppEnv(
            service_name="nightly-jobs", enable_debug_logging=True
        )


def test_environment_is_cached_until_reset() -> None:
    first = get_app_env()
    with patch.dict(environ, {"CRON_PREDICATE_SERVICE_NAME": "other"}):
        assert get_app_env() is first
        reset_app_env()
        assert get_app_env().service_name == "other"


def test_blank_service_name_falls_back_to_default() -> None:
    with patch.dict(environ, {"CRON_PREDICATE_SERVICE_NAME": "  "}):
        assert get_app_env().service_name == DEFAULT_SERVICE_NAME
