# ============================================================================
# src/medical_grounding/constants/unit_normalizations.py
# ============================================================================
"""
Unit spelling variants (lowercase variant -> canonical unit)

Matched case-insensitively as tokens: a variant never matches when a letter
touches either end (so "g/dl" leaves "mg/dL" alone and "sec" leaves
"second" alone).
"""

from types import MappingProxyType

UNIT_NORMALIZATIONS = MappingProxyType({
    "mg%": "mg/dL",
    "gm%": "g/dL",
    "gm/dl": "g/dL",
    "g/dl": "g/dL",
    "mg/dl": "mg/dL",
    "mmol/l": "mmol/L",
    "iu/l": "IU/L",
    "u/l": "U/L",
    "cells/cumm": "cells/cu.mm",
    "cells/ul": "cells/µL",
    "/cumm": "/cu.mm",
    "mm/hr": "mm/hr",
    "secs": "seconds",
    "sec": "seconds",
})
