"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "NOTEMIGRATE_"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    import_path:       str  = Field(default="notes",                  description="Exported notes directory")
    posts_path:        str  = Field(default="_notes/evernote-export", description="Directory for converted documents")
    media_path:        str  = Field(default="media/evernote-export",  description="Shared media directory")
    metadata_mode:     str  = Field(default="frontmatter", pattern="^(none|frontmatter)$", description="none or frontmatter")
    media_ref_mode:    str  = Field(default="path", pattern="^(path|placeholder)$", description="path or placeholder")
    media_placeholder: str  = Field(default="{{ media_path }}", description="Token substituted in placeholder mode")
    prettify:          bool = Field(default=False, description="Pretty-print content fragments")
    anchored_rewrite:  bool = Field(default=False, description="Only rewrite folder names at path boundaries")
    index_policy:      str  = Field(default="exclude", pattern="^(exclude|include)$", description="exclude or include")
    index_name:        str  = Field(default="index.html", description="Index document written by the exporter")
    on_error:          str  = Field(default="abort", pattern="^(abort|skip)$", description="abort or skip")
    cleanup:           bool = Field(default=True, description="Delete the source tree after migrating")
    content_tag:       str  = Field(default="body", min_length=1, description="Primary content container tag")
    document_suffix:   str  = Field(default=".html", description="Suffix of exported note documents")
    resource_suffix:   str  = Field(default=".resources", description="Suffix of resource folders")

    @property
    def media_reference(self) -> str:
        """Text that replaces resource folder names inside documents."""
        if self.media_ref_mode == "placeholder":
            return self.media_placeholder
        return self.media_path


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then NOTEMIGRATE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
