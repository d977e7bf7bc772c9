"""Export the plugin's environment variables as JSON for documentation.

Usage: python scripts/export_settings.py [output.json]
"""

import json
import sys
from pathlib import Path
from typing import Any

from pydantic_core import PydanticUndefined
from pydantic_settings import BaseSettings

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "plugin"))

from infrastructure.settings import HardLinkSettings, LoggingSettings  # noqa: E402

SETTINGS_CLASSES: tuple[type[BaseSettings], ...] = (HardLinkSettings, LoggingSettings)


def _display_default(default: Any) -> Any:
    # JSON keeps booleans native; everything else is shown as text
    if default is PydanticUndefined or default is None:
        return None
    if isinstance(default, bool):
        return default
    return str(default)


def get_model_metadata(settings_class: type[BaseSettings]) -> dict[str, Any]:
    """Describe one settings class: its prefix and one entry per env var."""
    prefix = settings_class.model_config.get("env_prefix", "")

    properties = []
    for name, info in settings_class.model_fields.items():
        default = info.get_default()
        properties.append(
            {
                "env_var": f"{prefix}{name.upper()}",
                "type": getattr(info.annotation, "__name__", str(info.annotation)),
                "default": _display_default(default),
                "required": default is PydanticUndefined,
                "description": info.description or "",
            }
        )

    return {
        "class_name": settings_class.__name__,
        "prefix": prefix,
        "doc": settings_class.__doc__ or "",
        "properties": properties,
    }


def export_settings(output_path: Path | None = None) -> Path:
    output_path = output_path or root_path / "docs" / "env-vars.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {cls.__name__: get_model_metadata(cls) for cls in SETTINGS_CLASSES}
    output_path.write_text(json.dumps(data, indent=2))

    print(f"Exported settings to {output_path}")
    return output_path


if __name__ == "__main__":
    export_settings(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
