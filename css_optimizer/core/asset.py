"""CSS asset descriptors."""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping
from ..utils.error import UnsupportedAssetError, ValidationError

class AssetKind(Enum):
    """Where an asset's contents come from."""
    FILE = 'file'
    EXTERNAL = 'external'

@dataclass(frozen=True)
class AssetDescriptor:
    """Metadata describing one stylesheet of an aggregation group."""
    kind: AssetKind
    preprocess: bool
    source_path: str
    media: str = 'all'
    weight: float = 0.0
    group: int = 0
    browsers: Mapping[str, bool] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'AssetDescriptor':
        """Build a descriptor from an asset definition mapping.

        Accepts the aggregation pipeline's keys (``type``, ``data``) as well
        as the attribute names; unknown keys such as ``basename`` are ignored.

        Args:
            data: Asset definition

        Returns:
            AssetDescriptor

        Raises:
            UnsupportedAssetError: If the asset type is unknown
            ValidationError: If the source path is missing
        """
        kind = data.get('kind', data.get('type'))
        if not isinstance(kind, AssetKind):
            try:
                kind = AssetKind(kind)
            except ValueError:
                raise UnsupportedAssetError("Only file CSS assets can be optimized.")
        source_path = data.get('source_path', data.get('data'))
        if source_path is None:
            raise ValidationError("CSS asset has no source path")
        return cls(
            kind=kind,
            preprocess=bool(data.get('preprocess', data.get('preprocess_enabled', False))),
            source_path=str(source_path),
            media=data.get('media', 'all'),
            weight=data.get('weight', 0.0),
            group=data.get('group', data.get('group_id', 0)),
            browsers=dict(data.get('browsers', data.get('browser_conditions', {}))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind.value,
            'preprocess': self.preprocess,
            'data': self.source_path,
            'media': self.media,
            'weight': self.weight,
            'group': self.group,
            'browsers': dict(self.browsers),
        }

# Exported names
__all__ = ['AssetKind', 'AssetDescriptor']
