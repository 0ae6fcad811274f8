"""
Named stress states offered as quick-start presets.
"""
from mohrview.structures.stress import StressState

# Written by the MohrView authors, 2026.


# ======================================================================

PRESETS: dict[str, StressState] = {
    'Default': StressState(80.0, -40.0, 50.0),
    'Uniaxial': StressState(100.0, 0.0, 0.0),
    'Biaxial': StressState(80.0, 40.0, 0.0),
    'Pure Shear': StressState(0.0, 0.0, 60.0),
    'Equal Biax': StressState(60.0, 60.0, 0.0),
}


def get_preset(name: str) -> StressState:
    """
    Returns the preset stress state `name` (case insensitive).

    Raises
    ------
    KeyError
        If no preset of that name exists.
    """
    for key, state in PRESETS.items():
        if key.lower() == name.lower():
            return state
    raise KeyError(f"Unknown preset '{name}', expected one of: "
                   f"{', '.join(PRESETS)}.")
