import json


def make_set_payload(**overrides):
    payload = {
        "object": "set",
        "id": "118f7e64-5caa-4cb7-99a8-184f4d3a7422",
        "code": "tla",
        "mtgo_code": "tla",
        "arena_code": "tla",
        "tcgplayer_id": 24421,
        "name": "Avatar: The Last Airbender",
        "uri": "https://api.scryfall.com/sets/118f7e64-5caa-4cb7-99a8-184f4d3a7422",
        "scryfall_uri": "https://scryfall.com/sets/tla",
        "search_uri": (
            "https://api.scryfall.com/cards/search?include_extras=true"
            "&include_variations=true&order=set&q=e%3Atla&unique=prints"
        ),
        "released_at": "2025-11-21",
        "set_type": "expansion",
        "card_count": 358,
        "digital": False,
        "nonfoil_only": False,
        "foil_only": False,
        "icon_svg_uri": "https://svgs.scryfall.io/sets/tla.svg?1762146000",
    }
    payload.update(overrides)
    return payload


def make_set_json(**overrides):
    return json.dumps(make_set_payload(**overrides))
