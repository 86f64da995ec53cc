"""
Facet schema for the door and window configurator.

Defines the fixed order in which attributes are asked, the question titles and
labels shown to the user (Portuguese UI text), and the field names used by the
catalog file and the natural-language facet extractor.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

# Attribute identifiers
CATEGORY = "category"
OPENING_SYSTEM = "opening_system"
SHADE = "shade"
SHADE_MOTORIZATION = "shade_motorization"
MATERIAL = "material"
WIDTH = "width"  # Range attribute
LEAF_COUNT = "leaf_count"

# Question order. Never reordered at runtime.
FACET_ORDER: Tuple[str, ...] = (
    CATEGORY,
    OPENING_SYSTEM,
    SHADE,
    SHADE_MOTORIZATION,
    MATERIAL,
    WIDTH,
    LEAF_COUNT,
)

# Attributes whose selection is an interval rather than a single value
RANGE_FACETS = frozenset({WIDTH})

# Values of the shade attribute
SHADE_YES = "sim"
SHADE_NO = "nao"


@dataclass(frozen=True)
class FacetDefinition:
    """
    Question title and labelling rule for one attribute.
    """
    title: str
    labels: Dict[str, str] = field(default_factory=dict)
    label_format: Optional[str] = None  # e.g. "{value} Folha(s)"


FACET_DEFINITIONS: Dict[str, FacetDefinition] = {
    CATEGORY: FacetDefinition(
        title="O que você procura?",
        labels={"janela": "Janela", "porta": "Porta"},
    ),
    OPENING_SYSTEM: FacetDefinition(
        title="Qual sistema de abertura você prefere?",
        labels={
            "janela-correr": "Correr",
            "porta-correr": "Correr",
            "maxim-ar": "Maxim-ar",
            "giro": "Giro",
        },
    ),
    SHADE: FacetDefinition(
        title="Precisa de persiana integrada?",
        labels={SHADE_YES: "Sim", SHADE_NO: "Não"},
    ),
    SHADE_MOTORIZATION: FacetDefinition(
        title="Persiana motorizada ou manual?",
        labels={"motorizada": "Motorizada", "manual": "Manual"},
    ),
    MATERIAL: FacetDefinition(
        title="Qual material de preenchimento você deseja?",
        labels={
            "vidro": "Vidro",
            "vidro + veneziana": "Vidro e Veneziana",
            "lambri": "Lambri",
            "veneziana": "Veneziana",
            "vidro + lambri": "Vidro e Lambri",
        },
    ),
    WIDTH: FacetDefinition(
        title="Qual a largura do vão?",
        label_format="{min}m a {max}m",
    ),
    LEAF_COUNT: FacetDefinition(
        title="Para este tamanho, qual o número de folhas?",
        label_format="{value} Folha(s)",
    ),
}

# Keys used by the facet extractor (and the catalog file) for each attribute
FACET_ALIASES: Dict[str, str] = {
    "categoria": CATEGORY,
    "sistema": OPENING_SYSTEM,
    "persiana": SHADE,
    "persianaMotorizada": SHADE_MOTORIZATION,
    "material": MATERIAL,
    "largura": WIDTH,
    "folhasNumber": LEAF_COUNT,
}

# Catalog CSV columns mapped to Product fields
CATALOG_COLUMN_MAP: Dict[str, str] = {
    "slug": "slug",
    "image": "image",
    "categoria": "category",
    "sistema": "opening_system",
    "persiana": "shade",
    "persianaMotorizada": "shade_motorization",
    "material": "material",
    "minLargura": "min_width",
    "maxLargura": "max_width",
    "folhasNumber": "leaf_count",
}

REQUIRED_CATALOG_COLUMNS = list(CATALOG_COLUMN_MAP.keys())

if set(FACET_DEFINITIONS) != set(FACET_ORDER):
    raise ValueError("FACET_DEFINITIONS must define every attribute in FACET_ORDER")
