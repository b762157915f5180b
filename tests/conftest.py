"""
Pytest configuration and shared fixtures.

Themes are written in their JSON document form and loaded through the serde
module, the same way the CLI reads them.
"""

import copy

import pytest

from tokenbridge.schema.serde import theme_from_dict
from tokenbridge.schema.tokens import ThemeFile

MINIMAL_THEME = {
    "name": "Test Theme",
    "collections": [
        {
            "name": "primitives",
            "modes": ["default"],
            "defaultMode": "default",
            "tokens": {
                "default": {
                    "color": {
                        "red": {"$type": "color", "$value": {"r": 1, "g": 0, "b": 0, "a": 1}},
                        "blue": {"$type": "color", "$value": {"r": 0, "g": 0, "b": 1, "a": 1}},
                    }
                }
            },
        }
    ],
}

MULTI_MODE_THEME = {
    "name": "Multi-Mode Theme",
    "collections": [
        {
            "name": "colors",
            "modes": ["light", "dark"],
            "defaultMode": "light",
            "tokens": {
                "light": {
                    "background": {
                        "$type": "color",
                        "$value": {"r": 1, "g": 1, "b": 1, "a": 1},
                        "$description": "Background color for light mode",
                    },
                    "text": {"$type": "color", "$value": {"r": 0, "g": 0, "b": 0, "a": 1}},
                },
                "dark": {
                    "background": {
                        "$type": "color",
                        "$value": {"r": 0.1, "g": 0.1, "b": 0.1, "a": 1},
                        "$description": "Background color for dark mode",
                    },
                    "text": {"$type": "color", "$value": {"r": 1, "g": 1, "b": 1, "a": 1}},
                },
            },
        }
    ],
}

MIXED_TYPES_THEME = {
    "name": "Mixed Types Theme",
    "collections": [
        {
            "name": "tokens",
            "modes": ["default"],
            "defaultMode": "default",
            "tokens": {
                "default": {
                    "color": {
                        "primary": {
                            "$type": "color",
                            "$value": {"r": 0.2, "g": 0.4, "b": 0.8, "a": 1},
                        }
                    },
                    "spacing": {
                        "small": {"$type": "dimension", "$value": {"value": 8, "unit": "px"}},
                        "large": {"$type": "dimension", "$value": {"value": 32, "unit": "rem"}},
                    },
                    "text": {"heading": {"$type": "string", "$value": "Heading Text"}},
                    "count": {"max": {"$type": "number", "$value": 100}},
                    "flag": {"enabled": {"$type": "boolean", "$value": True}},
                    "font": {
                        "family": {"$type": "fontFamily", "$value": ["Inter", "sans-serif"]},
                        "weight": {"$type": "fontWeight", "$value": "bold"},
                    },
                    "timing": {
                        "duration": {"$type": "duration", "$value": {"value": 200, "unit": "ms"}}
                    },
                    "shadow": {
                        "card": {
                            "$type": "shadow",
                            "$value": [
                                {
                                    "offsetX": {"value": 0, "unit": "px"},
                                    "offsetY": {"value": 4, "unit": "px"},
                                    "blur": {"value": 8, "unit": "px"},
                                    "spread": {"value": 0, "unit": "px"},
                                    "color": {"r": 0, "g": 0, "b": 0, "a": 0.1},
                                }
                            ],
                        }
                    },
                }
            },
        }
    ],
}

STYLES_THEME = {
    "name": "Styles Theme",
    "collections": [
        {
            "name": "styles",
            "modes": ["default"],
            "defaultMode": "default",
            "tokens": {
                "default": {
                    "heading": {
                        "h1": {
                            "$type": "typography",
                            "$description": "Page title",
                            "$value": {
                                "fontFamily": ["Roboto", "sans-serif"],
                                "fontSize": {"value": 32, "unit": "px"},
                                "fontWeight": "bold",
                                "lineHeight": 1.25,
                                "letterSpacing": {"value": -0.5, "unit": "px"},
                                "textTransform": "uppercase",
                            },
                        }
                    },
                    "elevation": {
                        "raised": {
                            "$type": "shadow",
                            "$value": {
                                "offsetX": {"value": 0, "unit": "px"},
                                "offsetY": {"value": 2, "unit": "px"},
                                "blur": {"value": 4, "unit": "px"},
                                "color": {"r": 0, "g": 0, "b": 0, "a": 0.2},
                            },
                        },
                        "pressed": {
                            "$type": "shadow",
                            "$value": [
                                {
                                    "offsetX": {"value": 0, "unit": "px"},
                                    "offsetY": {"value": 1, "unit": "px"},
                                    "blur": {"value": 2, "unit": "px"},
                                    "spread": {"value": 1, "unit": "px"},
                                    "color": {"r": 0, "g": 0, "b": 0, "a": 0.3},
                                    "inset": True,
                                },
                                {
                                    "offsetX": {"value": 0, "unit": "px"},
                                    "offsetY": {"value": 4, "unit": "px"},
                                    "blur": {"value": 8, "unit": "px"},
                                    "color": {"r": 0, "g": 0, "b": 0, "a": 0.1},
                                },
                            ],
                        },
                    },
                    "brand": {
                        "sunrise": {
                            "$type": "gradient",
                            "$value": {
                                "type": "linear",
                                "angle": 90,
                                "stops": [
                                    {"color": {"r": 1, "g": 0.5, "b": 0, "a": 1}, "position": 0},
                                    {"color": {"r": 1, "g": 0, "b": 0.5, "a": 1}, "position": 1},
                                ],
                            },
                        }
                    },
                    "color": {
                        "accent": {"$type": "color", "$value": {"r": 0, "g": 1, "b": 0, "a": 1}}
                    },
                }
            },
        }
    ],
}

VARIABLES_RESPONSE = {
    "status": 200,
    "error": False,
    "meta": {
        "variableCollections": {
            "VariableCollectionId:1:0": {
                "id": "VariableCollectionId:1:0",
                "name": "Theme",
                "modes": [
                    {"modeId": "1:0", "name": "Light"},
                    {"modeId": "1:1", "name": "Dark"},
                ],
                "defaultModeId": "1:0",
                "hiddenFromPublishing": False,
            },
            "VariableCollectionId:2:0": {
                "id": "VariableCollectionId:2:0",
                "name": "Internal",
                "modes": [{"modeId": "2:0", "name": "Mode 1"}],
                "defaultModeId": "2:0",
                "hiddenFromPublishing": True,
            },
            "VariableCollectionId:3:0": {
                "id": "VariableCollectionId:3:0",
                "name": "Empty",
                "modes": [{"modeId": "3:0", "name": "Mode 1"}],
                "defaultModeId": "3:0",
                "hiddenFromPublishing": False,
            },
        },
        "variables": {
            "VariableID:1:1": {
                "id": "VariableID:1:1",
                "name": "Colors/Primary Blue",
                "resolvedType": "COLOR",
                "variableCollectionId": "VariableCollectionId:1:0",
                "scopes": ["ALL_SCOPES"],
                "valuesByMode": {
                    "1:0": {"r": 0.2, "g": 0.4, "b": 0.8, "a": 1},
                    "1:1": {"r": 0.4, "g": 0.6, "b": 1, "a": 1},
                },
                "hiddenFromPublishing": False,
                "description": "Brand color",
                "codeSyntax": {"WEB": "var(--primary)"},
            },
            "VariableID:1:2": {
                "id": "VariableID:1:2",
                "name": "Colors/Link",
                "resolvedType": "COLOR",
                "variableCollectionId": "VariableCollectionId:1:0",
                "scopes": ["ALL_SCOPES"],
                "valuesByMode": {
                    "1:0": {"type": "VARIABLE_ALIAS", "id": "VariableID:1:1"},
                    "1:1": {"type": "VARIABLE_ALIAS", "id": "VariableID:9:9"},
                },
                "hiddenFromPublishing": False,
            },
            "VariableID:1:3": {
                "id": "VariableID:1:3",
                "name": "Spacing/Large",
                "resolvedType": "FLOAT",
                "variableCollectionId": "VariableCollectionId:1:0",
                "scopes": ["GAP"],
                "valuesByMode": {"1:0": 32},
                "hiddenFromPublishing": False,
            },
            "VariableID:1:4": {
                "id": "VariableID:1:4",
                "name": "Font/Body",
                "resolvedType": "STRING",
                "variableCollectionId": "VariableCollectionId:1:0",
                "scopes": ["FONT_FAMILY"],
                "valuesByMode": {"1:0": "Inter", "1:1": "Inter"},
                "hiddenFromPublishing": False,
            },
            "VariableID:2:1": {
                "id": "VariableID:2:1",
                "name": "Secret",
                "resolvedType": "BOOLEAN",
                "variableCollectionId": "VariableCollectionId:2:0",
                "scopes": [],
                "valuesByMode": {"2:0": True},
                "hiddenFromPublishing": False,
            },
        },
    },
}


def _load(document: dict) -> ThemeFile:
    return theme_from_dict(copy.deepcopy(document))


@pytest.fixture
def minimal_theme() -> ThemeFile:
    """Single collection, single mode, two colors."""
    return _load(MINIMAL_THEME)


@pytest.fixture
def multi_mode_theme() -> ThemeFile:
    """Light and dark modes with two colors each."""
    return _load(MULTI_MODE_THEME)


@pytest.fixture
def mixed_types_theme() -> ThemeFile:
    """One token of every variable-compatible type plus a shadow."""
    return _load(MIXED_TYPES_THEME)


@pytest.fixture
def styles_theme() -> ThemeFile:
    """Typography, shadow and gradient tokens next to a plain color."""
    return _load(STYLES_THEME)


@pytest.fixture
def variables_response() -> dict:
    """A /variables/local response with visible, hidden and empty collections."""
    return copy.deepcopy(VARIABLES_RESPONSE)


@pytest.fixture
def theme_documents() -> dict[str, dict]:
    """The fixture themes in their JSON document form, keyed by name."""
    return copy.deepcopy(
        {
            "minimal": MINIMAL_THEME,
            "multi_mode": MULTI_MODE_THEME,
            "mixed_types": MIXED_TYPES_THEME,
            "styles": STYLES_THEME,
        }
    )
