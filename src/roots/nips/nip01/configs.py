"""Declarative filter configuration.

Subscription filters are often fixed per deployment and kept in YAML next
to the rest of the configuration. [FilterConfig][roots.nips.nip01.configs.FilterConfig]
validates one entry and converts it into a
[Filter][roots.models.filter.Filter];
[load_filters()][roots.nips.nip01.configs.load_filters] reads a whole file.

Examples:
    ```yaml
    # filters.yaml
    filters:
      - kinds: [1, 6]
        since: 1700000000
        tags:
          t: [nostr]
      - authors: [cfa87f35]
        limit: 100
        extensions:
          search: relays
    ```

    ```python
    filters = load_filters("filters.yaml")
    matches_any(filters, event)
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from roots.core.exceptions import ConfigurationError
from roots.core.yaml import load_yaml
from roots.models.constants import EVENT_KIND_MAX, RESERVED_FILTER_FIELDS, TAG_MARKER
from roots.models.filter import Filter
from roots.utils.encoding import is_hex_prefix


class FilterConfig(BaseModel):
    """One subscription filter as written in a configuration file.

    Stricter than the wire codec, which must accept whatever a peer sends:
    configured prefixes must be lowercase hex, kinds must fit the protocol
    range, and extension keys may not shadow reserved names.

    See Also:
        [to_filter()][roots.nips.nip01.configs.FilterConfig.to_filter]:
            Converts this config into a [Filter][roots.models.filter.Filter].
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ids: list[str] | None = Field(default=None, description="Event id prefixes (None = all)")
    authors: list[str] | None = Field(default=None, description="Author prefixes (None = all)")
    kinds: list[int] | None = Field(default=None, description="Event kinds (None = all)")
    since: int | None = Field(default=None, description="Inclusive lower timestamp bound")
    until: int | None = Field(default=None, description="Inclusive upper timestamp bound")
    limit: int | None = Field(default=None, ge=0, description="Advisory result limit")
    tags: dict[str, list[str]] = Field(default_factory=dict, description="Tag name to values")
    extensions: dict[str, Any] = Field(default_factory=dict, description="Extra wire fields")

    @field_validator("ids", "authors", mode="after")
    @classmethod
    def validate_hex_prefixes(cls, v: list[str] | None) -> list[str] | None:
        """Validate that every entry is a lowercase hex prefix of at most 64 characters."""
        if v is None:
            return v
        for prefix in v:
            if not is_hex_prefix(prefix):
                raise ValueError(f"Invalid hex prefix: {prefix!r}")
        return v

    @field_validator("kinds", mode="after")
    @classmethod
    def validate_kinds(cls, v: list[int] | None) -> list[int] | None:
        """Validate that all event kinds are within the valid range (0-65535)."""
        if v is None:
            return v
        for kind in v:
            if not 0 <= kind <= EVENT_KIND_MAX:
                raise ValueError(f"Event kind {kind} out of valid range (0-{EVENT_KIND_MAX})")
        return v

    @field_validator("tags", mode="after")
    @classmethod
    def validate_tag_names(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Reject empty tag names and names written with the wire ``#`` marker."""
        for name in v:
            if not name or name.startswith(TAG_MARKER):
                raise ValueError(
                    f"Tag name {name!r} must be non-empty and given without {TAG_MARKER!r}"
                )
        return v

    @field_validator("extensions", mode="after")
    @classmethod
    def validate_extension_keys(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Reject extension keys the encoder would silently drop."""
        for key in v:
            if key in RESERVED_FILTER_FIELDS or key.startswith(TAG_MARKER):
                raise ValueError(f"Extension key {key!r} collides with a reserved filter field")
        return v

    def to_filter(self) -> Filter:
        """Build the immutable [Filter][roots.models.filter.Filter] for this config.

        Bounds left as ``None`` stay unset.
        """
        bounds = {
            name: value
            for name, value in (("since", self.since), ("until", self.until), ("limit", self.limit))
            if value is not None
        }
        return Filter(
            ids=self.ids,
            authors=self.authors,
            kinds=self.kinds,
            tags=self.tags,
            extensions=self.extensions,
            **bounds,
        )


class FiltersFileConfig(BaseModel):
    """Top-level layout of a filters YAML file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filters: list[FilterConfig] = Field(default_factory=list)


def load_filters(config_path: str | Path) -> list[Filter]:
    """Load subscription filters from a YAML file with a top-level ``filters`` list.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            does not describe valid filters.
    """
    data = load_yaml(config_path)
    try:
        config = FiltersFileConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid filters in {config_path}: {e}") from e
    return [entry.to_filter() for entry in config.filters]
