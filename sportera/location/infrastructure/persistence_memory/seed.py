"""Demo Places.

로컬 개발용 파리 지역 데모 장소입니다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sportera.location.domain.entities import Place
from sportera.location.domain.value_objects import ContactInfo

DEMO_PLACES: tuple[dict[str, Any], ...] = (
    {
        "name": "Stade Jean Bouin",
        "address": "26 Avenue du Général Sarrail, 75016 Paris",
        "description": "Stade municipal avec piste d'athlétisme et terrain de football",
        "coordinates": (2.2530, 48.8415),
        "sports": ["football", "running", "athlétisme"],
        "amenities": ["vestiaires", "parking", "éclairage"],
        "contact_info": {"phone": "01 42 88 02 76"},
    },
    {
        "name": "Piscine Molitor",
        "address": "13 Rue Nungesser et Coli, 75016 Paris",
        "description": "Piscine historique avec bassin olympique et bassin d'hiver",
        "coordinates": (2.2516, 48.8476),
        "sports": ["natation", "aquafitness"],
        "amenities": ["vestiaires", "sauna", "parking"],
        "contact_info": {"phone": "01 56 07 08 80", "website": "https://www.molitor.fr"},
    },
    {
        "name": "Tennis Club de Paris",
        "address": "Bois de Boulogne, 75016 Paris",
        "description": "Club de tennis avec courts couverts et extérieurs",
        "coordinates": (2.2441, 48.8566),
        "sports": ["tennis"],
        "amenities": ["vestiaires", "pro-shop", "restaurant"],
        "contact_info": {"phone": "01 45 27 79 12"},
    },
    {
        "name": "Gymnase Charras",
        "address": "7 Rue Charras, 92200 Neuilly-sur-Seine",
        "description": "Gymnase municipal polyvalent",
        "coordinates": (2.2689, 48.8814),
        "sports": ["basketball", "volleyball", "handball", "badminton"],
        "amenities": ["vestiaires", "parking"],
    },
    {
        "name": "Fitness Park Levallois",
        "address": "85 Rue Anatole France, 92300 Levallois-Perret",
        "description": "Salle de fitness moderne avec équipements dernière génération",
        "coordinates": (2.2875, 48.8947),
        "sports": ["fitness", "musculation", "crossfit"],
        "amenities": ["vestiaires", "parking", "sauna"],
        "contact_info": {"phone": "01 47 57 63 00", "website": "https://www.fitnesspark.fr"},
    },
    {
        "name": "Dojo Vincennes",
        "address": "12 Avenue de la République, 94300 Vincennes",
        "description": "Dojo traditionnel pour arts martiaux",
        "coordinates": (2.4364, 48.8466),
        "sports": ["judo", "karaté", "aikido", "arts-martiaux"],
        "amenities": ["vestiaires", "tatamis"],
    },
    {
        "name": "Piscine Georges Vallerey",
        "address": "148 Avenue Gambetta, 75020 Paris",
        "description": "Centre aquatique avec piscine olympique et bassin ludique",
        "coordinates": (2.4039, 48.8714),
        "sports": ["natation", "aquafitness", "plongée"],
        "amenities": ["vestiaires", "parking", "cafétéria"],
    },
    {
        "name": "Stade Charléty",
        "address": "99 Boulevard Kellermann, 75013 Paris",
        "description": "Stade d'athlétisme avec piste et aires de saut",
        "coordinates": (2.3461, 48.8186),
        "sports": ["athlétisme", "running", "football"],
        "amenities": ["vestiaires", "parking", "tribune"],
    },
)


def build_demo_places(now: datetime) -> list[Place]:
    """DEMO_PLACES를 검증된 Place 엔티티로 변환 (정의 순서 유지)."""
    places = []
    for data in DEMO_PLACES:
        longitude, latitude = data["coordinates"]
        places.append(
            Place.create(
                name=data["name"],
                latitude=latitude,
                longitude=longitude,
                sports=data["sports"],
                now=now,
                amenities=data.get("amenities"),
                contact_info=ContactInfo.from_dict(data.get("contact_info")),
                address=data.get("address"),
                description=data.get("description"),
            )
        )
    return places
