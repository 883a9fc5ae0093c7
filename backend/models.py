import enum


class SlicerConvention(str, enum.Enum):
    ORCA = "orca"
    CURA = "cura"


class VolumetricMode(str, enum.Enum):
    SOLVE_FOR_FLOW = "solve_for_flow"    # known print speed -> mm³/s
    SOLVE_FOR_SPEED = "solve_for_speed"  # known mm³/s -> print speed


# Nozzle sizes offered by the layer-height form (mm).
# Use as validation reference for the layer-height calculator.
SUPPORTED_NOZZLES = [0.2, 0.4, 0.6, 0.8, 1.0]

SLICER_LABELS = {
    SlicerConvention.ORCA: "OrcaSlicer",
    SlicerConvention.CURA: "Ultimaker Cura",
}


def parse_slicer(value) -> SlicerConvention:
    """Missing → OrcaSlicer. Anything that isn't "orca" uses the alternate convention."""
    if value is None or value == "":
        return SlicerConvention.ORCA
    if isinstance(value, SlicerConvention):
        return value
    if str(value).strip().lower() == SlicerConvention.ORCA.value:
        return SlicerConvention.ORCA
    return SlicerConvention.CURA


def parse_mode(value):
    """Return a VolumetricMode, or None when the value isn't a known mode."""
    if isinstance(value, VolumetricMode):
        return value
    try:
        return VolumetricMode(str(value).strip().lower())
    except ValueError:
        return None
