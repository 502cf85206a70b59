#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rsv_app.config.loader import ConfigLoader
from rsv_app.config.validation import ConfigValidator, ValidationError


def configured_instruments(loader: ConfigLoader) -> List[str]:
    """List instrument ids declared in instruments.yaml."""
    instruments_file = loader.config_dir / "instruments.yaml"
    if not instruments_file.exists():
        return []
    with open(instruments_file) as f:
        data = yaml.safe_load(f) or {}
    return sorted(data.get("instruments", {}))


def validate_instrument_config(loader: ConfigLoader, instrument_id: str) -> List[ValidationError]:
    """Validate merged configuration for a specific instrument."""
    config = loader.merge_config(instrument_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating RSV App configuration...")

    loader = ConfigLoader.create()
    instruments = configured_instruments(loader) + ["UNKNOWN-INSTRUMENT"]  # Should use defaults

    all_valid = True

    for instrument_id in instruments:
        print(f"\n📊 Validating {instrument_id}...")

        errors = validate_instrument_config(loader, instrument_id)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {instrument_id} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
