"""Material library for looking up Young's modulus by name."""

from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

MATERIALS_FILE = Path(__file__).parent / "materials.yaml"


def load_materials(path: Path = MATERIALS_FILE) -> Dict[str, Dict[str, Any]]:
    """Load the material table from YAML."""
    logger.debug(f"Loading materials from {path}")
    materials = yaml.safe_load(path.read_text()) or {}
    logger.debug(f"Loaded {len(materials)} materials")
    return materials


def get_youngs_modulus(name: str, path: Path = MATERIALS_FILE) -> float:
    """Return Young's modulus in Pa for a named material."""
    materials = load_materials(path)
    if name not in materials:
        available = ", ".join(sorted(materials))
        raise KeyError(f"Unknown material '{name}'. Available: {available}")
    return float(materials[name]["youngs_modulus_pa"])
