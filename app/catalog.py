"""Curated travel data used whenever live prices are unavailable.

Hotels are listed per destination; the first destination whose alias is
contained in the requested city wins, so more specific aliases must come
before shorter ones that they contain. Restaurants and transportation have
no per-city data and are templated from the city name.
"""

IMAGE_HOTEL_CLASSIC = "https://images.unsplash.com/photo-1566073771259-6a8506099945"
IMAGE_HOTEL_MODERN = "https://images.unsplash.com/photo-1571896349842-33c89424de2d"
IMAGE_HOTEL_LOUNGE = "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4"
IMAGE_STREET_FOOD = "https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b"
IMAGE_FINE_DINING = "https://images.unsplash.com/photo-1414235077428-338989a2e8c0"
IMAGE_CAFE = "https://images.unsplash.com/photo-1501339847302-ac426a4a7cbb"

# (display name, aliases, hotels)
DESTINATIONS: list[tuple[str, tuple[str, ...], list[dict]]] = [
    (
        "Lucknow",
        ("lucknow",),
        [
            {
                "id": "lucknow-1",
                "name": "Clarks Avadh Hotel",
                "rating": 4.3,
                "price": 4500,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Gomti Nagar, Lucknow",
                "amenities": ["WiFi", "Pool", "Restaurant", "Spa"],
                "description": "Luxury hotel in the heart of Lucknow with modern amenities",
            },
            {
                "id": "lucknow-2",
                "name": "Hotel Taj Residency",
                "rating": 4.1,
                "price": 3200,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Hazratganj, Lucknow",
                "amenities": ["WiFi", "Restaurant", "Parking", "Room Service"],
                "description": "Comfortable accommodation in the historic center of Lucknow",
            },
            {
                "id": "lucknow-3",
                "name": "Novotel Lucknow",
                "rating": 4.5,
                "price": 6800,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Gomti Nagar, Lucknow",
                "amenities": ["WiFi", "Pool", "Gym", "Restaurant", "Spa"],
                "description": "International standard hotel with premium facilities",
            },
        ],
    ),
    (
        "Paris",
        ("paris",),
        [
            {
                "id": "paris-1",
                "name": "Hotel Ritz Paris",
                "rating": 4.8,
                "price": 100000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Place Vendôme, Paris",
                "amenities": ["WiFi", "Pool", "Restaurant", "Spa", "Concierge"],
                "description": "Iconic luxury hotel in the heart of Paris",
            },
            {
                "id": "paris-2",
                "name": "Le Meurice",
                "rating": 4.7,
                "price": 85000,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Rue de Rivoli, Paris",
                "amenities": ["WiFi", "Restaurant", "Spa", "Room Service"],
                "description": "Elegant palace hotel with stunning city views",
            },
        ],
    ),
    (
        "Tokyo",
        ("tokyo",),
        [
            {
                "id": "tokyo-1",
                "name": "Park Hyatt Tokyo",
                "rating": 4.6,
                "price": 65000,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Shinjuku, Tokyo",
                "amenities": ["WiFi", "Pool", "Gym", "Restaurant", "Spa"],
                "description": "Luxury hotel with panoramic city views",
            },
            {
                "id": "tokyo-2",
                "name": "Aman Tokyo",
                "rating": 4.9,
                "price": 95000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Otemachi, Tokyo",
                "amenities": ["WiFi", "Spa", "Restaurant", "Concierge"],
                "description": "Ultra-luxury urban resort in central Tokyo",
            },
        ],
    ),
    (
        "New York",
        ("new york", "newyork", "nyc"),
        [
            {
                "id": "nyc-1",
                "name": "The Plaza Hotel",
                "rating": 4.7,
                "price": 65000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Central Park South, NYC",
                "amenities": ["WiFi", "Restaurant", "Spa", "Concierge", "Valet"],
                "description": "Historic luxury hotel overlooking Central Park",
            },
            {
                "id": "nyc-2",
                "name": "The Standard High Line",
                "rating": 4.4,
                "price": 25000,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Meatpacking District, NYC",
                "amenities": ["WiFi", "Rooftop Bar", "Restaurant", "Gym"],
                "description": "Modern boutique hotel in trendy neighborhood",
            },
        ],
    ),
    (
        "London",
        ("london",),
        [
            {
                "id": "london-1",
                "name": "The Ritz London",
                "rating": 4.8,
                "price": 65000,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Piccadilly, London",
                "amenities": ["WiFi", "Afternoon Tea", "Restaurant", "Concierge"],
                "description": "Iconic luxury hotel in the heart of London",
            },
            {
                "id": "london-2",
                "name": "The Savoy",
                "rating": 4.6,
                "price": 58000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Strand, London",
                "amenities": ["WiFi", "Pool", "Restaurant", "Spa", "Bar"],
                "description": "Historic luxury hotel on the River Thames",
            },
        ],
    ),
    (
        "Barcelona",
        ("barcelona",),
        [
            {
                "id": "barcelona-1",
                "name": "Hotel Arts Barcelona",
                "rating": 4.5,
                "price": 38000,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Port Olímpic, Barcelona",
                "amenities": ["WiFi", "Pool", "Restaurant", "Spa", "Beach Access"],
                "description": "Luxury beachfront hotel with stunning sea views",
            },
            {
                "id": "barcelona-2",
                "name": "W Barcelona",
                "rating": 4.3,
                "price": 32000,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Barceloneta Beach, Barcelona",
                "amenities": ["WiFi", "Rooftop Pool", "Restaurant", "Nightclub"],
                "description": "Modern design hotel with vibrant atmosphere",
            },
        ],
    ),
    (
        "Mumbai",
        ("mumbai", "bombay"),
        [
            {
                "id": "mumbai-1",
                "name": "The Taj Mahal Palace",
                "rating": 4.8,
                "price": 15000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Apollo Bunder, Mumbai",
                "amenities": ["WiFi", "Pool", "Spa", "Restaurant", "Heritage"],
                "description": "Historic luxury hotel overlooking the Gateway of India",
            },
            {
                "id": "mumbai-2",
                "name": "Trident Bandra Kurla",
                "rating": 4.4,
                "price": 8500,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Bandra East, Mumbai",
                "amenities": ["WiFi", "Pool", "Gym", "Business Center"],
                "description": "Modern business hotel in the financial district",
            },
        ],
    ),
    (
        "New Delhi",
        ("new delhi", "delhi"),
        [
            {
                "id": "delhi-1",
                "name": "The Leela Palace New Delhi",
                "rating": 4.7,
                "price": 12000,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Chanakyapuri, New Delhi",
                "amenities": ["WiFi", "Spa", "Pool", "Restaurant", "Butler Service"],
                "description": "Luxury hotel near diplomatic quarter",
            },
            {
                "id": "delhi-2",
                "name": "ITC Maurya",
                "rating": 4.5,
                "price": 9500,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Sardar Patel Marg, New Delhi",
                "amenities": ["WiFi", "Spa", "Pool", "Multiple Restaurants"],
                "description": "Award-winning luxury hotel with world-class amenities",
            },
        ],
    ),
    (
        "Dubai",
        ("dubai",),
        [
            {
                "id": "dubai-1",
                "name": "Burj Al Arab Jumeirah",
                "rating": 4.9,
                "price": 210000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Jumeirah Beach, Dubai",
                "amenities": ["WiFi", "Private Beach", "Spa", "Helicopter Pad"],
                "description": "Iconic sail-shaped luxury hotel",
            },
            {
                "id": "dubai-2",
                "name": "Atlantis The Palm",
                "rating": 4.6,
                "price": 68000,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Palm Jumeirah, Dubai",
                "amenities": ["WiFi", "Aquarium", "Water Park", "Beach"],
                "description": "Resort with underwater suites and aquarium views",
            },
        ],
    ),
    (
        "Singapore",
        ("singapore",),
        [
            {
                "id": "singapore-1",
                "name": "Marina Bay Sands",
                "rating": 4.4,
                "price": 38000,
                "currency": "INR",
                "image": IMAGE_HOTEL_LOUNGE,
                "location": "Marina Bay, Singapore",
                "amenities": ["WiFi", "Infinity Pool", "Casino", "Shopping"],
                "description": "Iconic hotel with rooftop infinity pool",
            },
            {
                "id": "singapore-2",
                "name": "Raffles Singapore",
                "rating": 4.7,
                "price": 55000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Beach Road, Singapore",
                "amenities": ["WiFi", "Spa", "Heritage", "Butler Service"],
                "description": "Historic colonial hotel, birthplace of Singapore Sling",
            },
        ],
    ),
    (
        "Rome",
        ("rome",),
        [
            {
                "id": "rome-1",
                "name": "Hotel de Russie",
                "rating": 4.7,
                "price": 45000,
                "currency": "INR",
                "image": IMAGE_HOTEL_CLASSIC,
                "location": "Via del Babuino, Rome",
                "amenities": ["WiFi", "Garden", "Restaurant", "Spa", "Concierge"],
                "description": "Elegant hotel near the Spanish Steps",
            },
            {
                "id": "rome-2",
                "name": "The St. Regis Rome",
                "rating": 4.6,
                "price": 58000,
                "currency": "INR",
                "image": IMAGE_HOTEL_MODERN,
                "location": "Via Vittorio Emanuele Orlando, Rome",
                "amenities": ["WiFi", "Restaurant", "Bar", "Concierge", "Butler"],
                "description": "Luxury hotel in the heart of historic Rome",
            },
        ],
    ),
]

# Unknown cities: one hotel per tier, templated with {city}
GENERIC_HOTELS: list[dict] = [
    {
        "name": "Grand {city} Hotel",
        "rating": 4.5,
        "price": 8500,
        "currency": "INR",
        "image": IMAGE_HOTEL_CLASSIC,
        "location": "{city} City Center",
        "amenities": ["WiFi", "Pool", "Gym", "Restaurant"],
        "description": "Luxurious hotel in the heart of {city}",
    },
    {
        "name": "{city} Comfort Inn & Suites",
        "rating": 4.0,
        "price": 6000,
        "currency": "INR",
        "image": IMAGE_HOTEL_MODERN,
        "location": "{city} Downtown",
        "amenities": ["WiFi", "Breakfast", "Parking"],
        "description": "Comfortable and affordable accommodation in {city}",
    },
    {
        "name": "{city} Business Hotel",
        "rating": 4.2,
        "price": 7000,
        "currency": "INR",
        "image": IMAGE_HOTEL_LOUNGE,
        "location": "{city} Business District",
        "amenities": ["WiFi", "Business Center", "Conference Rooms", "Gym"],
        "description": "Modern business hotel perfect for corporate travelers in {city}",
    },
]

RESTAURANTS: list[dict] = [
    {
        "name": "Local Flavors Bistro",
        "cuisine": "Local",
        "price_range": "$$",
        "average_price": 25,
        "rating": 4.5,
        "reviews": 234,
        "location": "Downtown, {city}",
        "open_hours": "11:00 AM - 10:00 PM",
        "specialties": ["Traditional dishes", "Fresh seafood", "Local wine"],
        "image": IMAGE_HOTEL_LOUNGE,
    },
    {
        "name": "Street Food Paradise",
        "cuisine": "Street Food",
        "price_range": "$",
        "average_price": 8,
        "rating": 4.2,
        "reviews": 456,
        "location": "Market District, {city}",
        "open_hours": "6:00 AM - 11:00 PM",
        "specialties": ["Quick bites", "Local snacks", "Fresh juices"],
        "image": IMAGE_STREET_FOOD,
    },
    {
        "name": "Fine Dining Experience",
        "cuisine": "International",
        "price_range": "$$$",
        "average_price": 75,
        "rating": 4.7,
        "reviews": 128,
        "location": "Uptown, {city}",
        "open_hours": "6:00 PM - 12:00 AM",
        "specialties": ["Gourmet cuisine", "Wine pairing", "Chef specials"],
        "image": IMAGE_FINE_DINING,
    },
    {
        "name": "Family Corner Cafe",
        "cuisine": "Cafe",
        "price_range": "$",
        "average_price": 12,
        "rating": 4.1,
        "reviews": 167,
        "location": "Residential Area, {city}",
        "open_hours": "7:00 AM - 6:00 PM",
        "specialties": ["Coffee", "Pastries", "Light meals"],
        "image": IMAGE_CAFE,
    },
]

TRANSPORTATION: list[dict] = [
    {
        "name": "City Taxi",
        "type": "taxi",
        "base_price": 5,
        "per_km_price": 2,
        "rating": 4.0,
        "reviews": 892,
        "capacity": 4,
        "estimated_wait_time": "5-10 min",
    },
    {
        "name": "Uber",
        "type": "rideshare",
        "base_price": 4,
        "per_km_price": 1.8,
        "rating": 4.3,
        "reviews": 1234,
        "capacity": 4,
        "estimated_wait_time": "3-7 min",
    },
    {
        "name": "Local Ride Share",
        "type": "local",
        "base_price": 3,
        "per_km_price": 1.5,
        "rating": 3.9,
        "reviews": 456,
        "capacity": 6,
        "estimated_wait_time": "8-15 min",
    },
    {
        "name": "Car Rental",
        "type": "rental",
        "base_price": 35,
        "per_km_price": 0,
        "rating": 4.2,
        "reviews": 324,
        "capacity": 5,
        "estimated_wait_time": "Pick up anytime",
    },
]
