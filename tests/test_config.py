import os

import pytest

from cyberkit.config import (
    Config,
    ConversionPolicy,
    DownloadPolicy,
    FloatPrecision,
    parse_conversion_policy,
    parse_download_policy,
    parse_float_precision,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("missing", DownloadPolicy.MISSING),
        ("always", DownloadPolicy.ALWAYS),
        ("never", DownloadPolicy.NEVER),
    ],
)
def test_parse_download_policy(text, expected):
    assert parse_download_policy(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("missing", ConversionPolicy.MISSING),
        ("always", ConversionPolicy.ALWAYS),
        ("never", ConversionPolicy.NEVER),
    ],
)
def test_parse_conversion_policy(text, expected):
    assert parse_conversion_policy(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("32", FloatPrecision.F32), ("64", FloatPrecision.F64)],
)
def test_parse_float_precision(text, expected):
    assert parse_float_precision(text) is expected


@pytest.mark.parametrize(
    "parser, bad",
    [
        (parse_download_policy, "sometimes"),
        (parse_download_policy, "Missing"),
        (parse_conversion_policy, ""),
        (parse_float_precision, "16"),
    ],
)
def test_parse_invalid_values(parser, bad):
    with pytest.raises(ValueError, match="invalid model"):
        parser(bad)


def test_invalid_value_is_quoted_in_message():
    with pytest.raises(ValueError) as info:
        parse_float_precision("128")
    assert '"128"' in str(info.value)


def test_defaults_are_missing_and_f32():
    conf = Config()
    assert conf.download_policy is DownloadPolicy.MISSING
    assert conf.conversion_policy is ConversionPolicy.MISSING
    assert conf.conversion_precision is FloatPrecision.F32


def test_full_model_path_joins_dir_and_name():
    conf = Config(models_dir="models", model_name="org/model")
    assert conf.full_model_path() == os.path.normpath(
        os.path.join("models", "org", "model")
    )


def test_full_model_path_without_dir_is_model_name():
    conf = Config(model_name="bert-base-cased")
    assert conf.full_model_path() == "bert-base-cased"


def test_full_model_path_empty():
    assert Config().full_model_path() == ""