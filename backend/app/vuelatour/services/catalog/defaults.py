"""Values used when an admin has not curated a catalog field yet."""

from typing import Any, Dict, List

DEFAULT_MAX_PASSENGERS = 5

DEFAULT_SERVICES_INCLUDED: List[str] = [
    "climate",
    "luggage",
    "water",
    "photos",
    "sanitizer",
    "safety",
]

DEFAULT_AIRCRAFT_PRICING: List[Dict[str, Any]] = [
    {
        "aircraft_name": "Cessna 206",
        "max_passengers": 5,
        "price_usd": 750,
        "notes_es": "No incluye impuestos y posibles cargos extras*",
        "notes_en": "Does not include taxes and possible extra charges*",
    },
]

DEFAULT_BENEFITS: List[Dict[str, str]] = [
    {
        "key": "time",
        "title_es": "Ahorra tiempo",
        "title_en": "Save time",
        "desc_es": "Evita largas horas de carretera y llega en minutos",
        "desc_en": "Avoid long road trips and arrive in minutes",
    },
    {
        "key": "comfort",
        "title_es": "Máximo confort",
        "title_en": "Maximum comfort",
        "desc_es": "Viaja en avioneta privada con todas las comodidades",
        "desc_en": "Travel in a private aircraft with all amenities",
    },
    {
        "key": "views",
        "title_es": "Vistas increíbles",
        "title_en": "Incredible views",
        "desc_es": "Disfruta del paisaje del Caribe desde las alturas",
        "desc_en": "Enjoy the Caribbean landscape from above",
    },
    {
        "key": "flexible",
        "title_es": "Horarios flexibles",
        "title_en": "Flexible schedules",
        "desc_es": "Elige el horario que mejor se adapte a tu itinerario",
        "desc_en": "Choose the time that best fits your itinerary",
    },
]

DEFAULT_FEATURES: List[Dict[str, str]] = [
    {
        "key": "views",
        "title_es": "Vistas panorámicas",
        "title_en": "Panoramic views",
        "desc_es": "Observa paisajes increíbles desde las alturas",
        "desc_en": "Observe incredible landscapes from the heights",
    },
    {
        "key": "comfort",
        "title_es": "Vuelo cómodo",
        "title_en": "Comfortable flight",
        "desc_es": "Avionetas modernas y bien mantenidas",
        "desc_en": "Modern and well-maintained aircraft",
    },
    {
        "key": "memories",
        "title_es": "Recuerdos inolvidables",
        "title_en": "Unforgettable memories",
        "desc_es": "Llévate fotos espectaculares de tu aventura",
        "desc_en": "Take spectacular photos of your adventure",
    },
    {
        "key": "expert",
        "title_es": "Pilotos expertos",
        "title_en": "Expert pilots",
        "desc_es": "Más de 15 años de experiencia en la región",
        "desc_en": "Over 15 years of experience in the region",
    },
]

DEFAULT_TOUR_DEPARTURE = {"es": "Aeropuerto de Cancún", "en": "Cancún Airport"}
