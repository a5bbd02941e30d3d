# topcar/catalog.py
"""
Default service packages offered by the business.

Seeded into the ``service_packages`` table the first time the schema is
created; after that the table is the source of truth and admins edit it
through ``/services``.
"""

SERVICE_PACKAGES = [
    {
        "id": "basic-detail",
        "name": "Basic Detail",
        "description": "Essential exterior and interior cleaning",
        "inclusions": [
            "Exterior wash and dry",
            "Interior vacuum",
            "Dashboard and console wipe",
            "Window cleaning (interior)",
            "Tire shine",
        ],
        "base_price": 79,
        "premium_price": 100,
        "duration": 90,
        "category": "basic",
    },
    {
        "id": "interior-detail",
        "name": "Interior Detail",
        "description": "Deep interior cleaning and shampooing",
        "inclusions": [
            "Complete interior vacuum",
            "Seat shampooing and conditioning",
            "Dashboard and trim detailing",
            "Door panel cleaning",
            "Floor mat cleaning",
            "Interior glass cleaning",
        ],
        "base_price": 129,
        "premium_price": 189,
        "duration": 120,
        "category": "interior",
    },
    {
        "id": "full-detail",
        "name": "Full Detail",
        "description": "Complete interior and exterior detailing",
        "inclusions": [
            "Everything in Basic Detail",
            "Everything in Interior Detail",
            "Exterior wax application",
            "Wheel and tire detailing",
            "Chrome polishing",
        ],
        "base_price": 199,
        "premium_price": 300,
        "duration": 180,
        "category": "full",
    },
    {
        "id": "cut-polish",
        "name": "Cut & Polish",
        "description": "Paint decontamination and polishing",
        "inclusions": [
            "Paint decontamination",
            "Machine polishing",
            "Swirl mark removal",
            "Paint protection application",
            "Exterior detailing",
        ],
        "base_price": 229,
        "premium_price": 340,
        "duration": 240,
        "category": "premium",
    },
    {
        "id": "ultimate-detail",
        "name": "Ultimate Detail",
        "description": "Premium full service package",
        "inclusions": [
            "Everything in Full Detail",
            "Everything in Cut & Polish",
            "Engine bay cleaning",
            "Headlight restoration",
            "Premium wax application",
        ],
        "base_price": 275,
        "premium_price": 450,
        "duration": 300,
        "category": "premium",
    },
    {
        "id": "paint-protection",
        "name": "Paint Protection",
        "description": "Professional paint protection service",
        "inclusions": [
            "Paint assessment",
            "Surface preparation",
            "Paint protection film application",
            "Ceramic coating option",
            "Free quote consultation",
        ],
        "base_price": 800,
        "premium_price": 1200,
        "duration": 480,
        "category": "premium",
    },
]
