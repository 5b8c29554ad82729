"""Configuration for locating, downloading and converting pre-trained models."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "DownloadPolicy",
    "ConversionPolicy",
    "FloatPrecision",
    "Config",
    "parse_download_policy",
    "parse_conversion_policy",
    "parse_float_precision",
]


class DownloadPolicy(IntEnum):
    """Policy for downloading a model."""

    MISSING = 0
    """Download the model only if it does not exist."""
    ALWAYS = 1
    """Download the model even if it already exists."""
    NEVER = 2
    """Never download the model."""


class ConversionPolicy(IntEnum):
    """Policy for converting a pre-trained model."""

    MISSING = 0
    """Convert the model only if it does not exist."""
    ALWAYS = 1
    """Convert the model even if it already exists."""
    NEVER = 2
    """Never convert the model."""


class FloatPrecision(IntEnum):
    """Floating-point precision of the converted model."""

    F32 = 0
    F64 = 1


@dataclass
class Config:
    """Configuration for the model loader."""

    models_dir: str = ""
    """Directory where the models are stored."""
    model_name: str = ""
    """Name of the model, in the form ``<org>/<model>``."""
    hub_access_token: str = ""
    """Access token for the model hub."""
    download_policy: DownloadPolicy = DownloadPolicy.MISSING
    conversion_policy: ConversionPolicy = ConversionPolicy.MISSING
    conversion_precision: FloatPrecision = FloatPrecision.F32

    def full_model_path(self) -> str:
        """Return the directory holding the model files."""
        joined = os.path.join(self.models_dir, self.model_name)
        return os.path.normpath(joined) if joined else ""


_DOWNLOAD_POLICIES = {
    "missing": DownloadPolicy.MISSING,
    "always": DownloadPolicy.ALWAYS,
    "never": DownloadPolicy.NEVER,
}

_CONVERSION_POLICIES = {
    "missing": ConversionPolicy.MISSING,
    "always": ConversionPolicy.ALWAYS,
    "never": ConversionPolicy.NEVER,
}

_FLOAT_PRECISIONS = {
    "32": FloatPrecision.F32,
    "64": FloatPrecision.F64,
}


def parse_download_policy(s: str) -> DownloadPolicy:
    """Parse a string such as ``"missing"`` into a download policy."""
    try:
        return _DOWNLOAD_POLICIES[s]
    except KeyError:
        raise ValueError(f"invalid model download policy value {json.dumps(s)}") from None


def parse_conversion_policy(s: str) -> ConversionPolicy:
    """Parse a string such as ``"always"`` into a conversion policy."""
    try:
        return _CONVERSION_POLICIES[s]
    except KeyError:
        raise ValueError(f"invalid model conversion policy value {json.dumps(s)}") from None


def parse_float_precision(s: str) -> FloatPrecision:
    """Parse ``"32"`` or ``"64"`` into a floating-point precision."""
    try:
        return _FLOAT_PRECISIONS[s]
    except KeyError:
        raise ValueError(
            f"invalid model floating-point precision value {json.dumps(s)}"
        ) from None