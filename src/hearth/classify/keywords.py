"""Keyword tables for allergen and dietary classification."""

from enum import StrEnum


class AllergenTag(StrEnum):
    NUTS = "nuts"
    EGGS = "eggs"
    DAIRY = "dairy"
    GLUTEN = "gluten"
    SHELLFISH = "shellfish"
    SOY = "soy"
    FISH = "fish"


class DietaryTag(StrEnum):
    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    PESCATARIAN = "pescatarian"


ALLERGEN_KEYWORDS: dict[AllergenTag, tuple[str, ...]] = {
    AllergenTag.NUTS: (
        "almond", "almonds",
        "walnut", "walnuts",
        "pecan", "pecans",
        "cashew", "cashews",
        "pistachio", "pistachios",
        "hazelnut", "hazelnuts",
        "macadamia", "macadamias",
        "brazil nut", "brazil nuts",
        "pine nut", "pine nuts",
        "peanut", "peanuts", "peanut butter",
        "nut", "nuts",
        "praline",
        "marzipan",
        "nougat",
        "nutella",
    ),
    AllergenTag.EGGS: (
        "egg", "eggs",
        "egg white", "egg whites",
        "egg yolk", "egg yolks",
        "mayonnaise", "mayo",
        "meringue",
        "custard",
        "aioli",
        "hollandaise",
        "bearnaise",
    ),
    AllergenTag.DAIRY: (
        "milk",
        "cream", "heavy cream", "whipping cream", "sour cream", "cream cheese",
        "cheese", "cheddar", "mozzarella", "parmesan", "gruyere", "brie", "feta", "gouda",
        "ricotta", "mascarpone", "gorgonzola", "camembert", "swiss cheese", "provolone",
        "cottage cheese",
        "butter", "unsalted butter", "salted butter",
        "yogurt", "yoghurt", "greek yogurt",
        "ghee",
        "buttermilk",
        "condensed milk", "evaporated milk",
        "half and half", "half-and-half",
        "whey",
        "casein",
        "lactose",
        "creme fraiche", "crème fraîche",
        "ice cream",
        "gelato",
        "paneer",
        "quark",
        "kefir",
    ),
    AllergenTag.GLUTEN: (
        "flour", "all-purpose flour", "bread flour", "cake flour", "whole wheat flour",
        "wheat flour", "self-rising flour",
        "bread", "breadcrumbs", "bread crumbs", "panko",
        "pasta", "spaghetti", "penne", "fettuccine", "linguine", "macaroni", "lasagna",
        "noodles", "ramen", "udon",
        "wheat", "whole wheat",
        "barley",
        "rye",
        "spelt",
        "semolina",
        "couscous",
        "bulgur",
        "farro",
        "seitan",
        "soy sauce",  # brewed with wheat
        "teriyaki sauce",
        "malt", "malt vinegar", "malted",
        "beer",
        "ale",
        "croutons",
        "tortilla",
        "pita", "pita bread",
        "naan",
        "baguette",
        "croissant",
    ),
    AllergenTag.SHELLFISH: (
        "shrimp", "shrimps", "prawns", "prawn",
        "crab", "crab meat", "crabmeat",
        "lobster",
        "crawfish", "crayfish", "crawdad",
        "oyster", "oysters",
        "mussel", "mussels",
        "clam", "clams",
        "scallop", "scallops",
        "squid", "calamari",
        "octopus",
        "abalone",
        "snail", "escargot",
        "conch",
    ),
    AllergenTag.SOY: (
        "soy", "soya",
        "soy sauce", "soya sauce",
        "tofu",
        "tempeh",
        "edamame",
        "miso",
        "soy milk", "soya milk", "soymilk",
        "soybean", "soybeans", "soya bean", "soya beans",
        "soy protein",
        "textured vegetable protein", "tvp",
        "tamari",
        "natto",
    ),
    AllergenTag.FISH: (
        "fish",
        "salmon",
        "tuna",
        "cod",
        "tilapia",
        "halibut",
        "trout",
        "sardine", "sardines",
        "anchovy", "anchovies",
        "mackerel",
        "herring",
        "bass", "sea bass",
        "catfish",
        "snapper",
        "swordfish",
        "mahi mahi", "mahi-mahi",
        "flounder",
        "sole",
        "haddock",
        "perch",
        "pike",
        "carp",
        "fish sauce",
        "worcestershire sauce",  # anchovies
    ),
}

MEAT_KEYWORDS: tuple[str, ...] = (
    "beef", "steak", "ground beef", "mince", "minced beef",
    "pork", "bacon", "ham", "sausage", "prosciutto", "pancetta", "chorizo", "pepperoni", "salami",
    "chicken", "turkey", "duck", "goose", "quail", "pheasant",
    "lamb", "mutton",
    "veal",
    "venison",
    "rabbit",
    "bison", "buffalo",
    "goat",
    "meat", "meatball", "meatballs",
    "hot dog", "hotdog",
    "bratwurst",
    "kielbasa",
    "bone broth",
    "chicken stock", "beef stock", "pork stock",
    "chicken broth", "beef broth",
    "lard",
    "gelatin", "gelatine",
    "suet",
    "drippings",
)

FISH_KEYWORDS: tuple[str, ...] = (
    ALLERGEN_KEYWORDS[AllergenTag.FISH] + ALLERGEN_KEYWORDS[AllergenTag.SHELLFISH]
)

OTHER_ANIMAL_PRODUCTS: tuple[str, ...] = (
    "honey",
    "beeswax",
    "gelatin", "gelatine",
    "bone char",
    "carmine", "cochineal",
    "isinglass",
    "shellac",
    "lanolin",
    "whey",
    "casein",
    "lactose",
)

ANIMAL_PRODUCT_KEYWORDS: tuple[str, ...] = (
    ALLERGEN_KEYWORDS[AllergenTag.EGGS]
    + ALLERGEN_KEYWORDS[AllergenTag.DAIRY]
    + OTHER_ANIMAL_PRODUCTS
)
