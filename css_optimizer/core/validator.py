"""Core CSS asset validation functionality."""

import logging
from typing import Any, Mapping, Union
from ..utils.error import (
    PreprocessingDisabledError,
    UnsupportedAssetError,
    ValidationError,
)
from .asset import AssetDescriptor, AssetKind

logger = logging.getLogger(__name__)

def validate_asset(asset: Union[AssetDescriptor, Mapping[str, Any]]) -> AssetDescriptor:
    """Check that an asset can be optimized.

    Args:
        asset: Descriptor or asset definition mapping

    Returns:
        The validated descriptor

    Raises:
        UnsupportedAssetError: If the asset is not a file asset
        PreprocessingDisabledError: If preprocessing is disabled
        ValidationError: If the asset is malformed
    """
    if isinstance(asset, Mapping):
        asset = AssetDescriptor.from_mapping(asset)
    elif not isinstance(asset, AssetDescriptor):
        raise ValidationError(f"Expected a CSS asset, got {type(asset).__name__}")

    if asset.kind is not AssetKind.FILE:
        raise UnsupportedAssetError("Only file CSS assets can be optimized.")
    if not asset.preprocess:
        raise PreprocessingDisabledError(
            "Only file CSS assets with preprocessing enabled can be optimized."
        )
    if not asset.source_path:
        raise ValidationError("CSS asset has an empty source path")

    logger.debug(f"Validated CSS asset {asset.source_path}")
    return asset

# Exported functions
__all__ = ['validate_asset']
