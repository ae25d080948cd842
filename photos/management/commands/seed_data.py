user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

outfit_titles = [
    "Monochrome Monday",
    "Linen for the heatwave",
    "Thrifted denim jacket",
    "Office casual",
    "Layered autumn look",
    "Weekend streetwear",
    "Wedding guest outfit",
    "Vintage knit",
    "All black everything",
    "Festival fit",
    "Minimal capsule outfit",
    "Rainy day layers",
]

bio_phrases = [
    "Secondhand first.",
    "Mostly neutrals, sometimes neon.",
    "Tailoring nerd.",
    "Sneakers over everything.",
    "Building a capsule wardrobe one piece at a time.",
    "Rate my fits honestly!",
]

comment_phrases = [
    "Love this combo!",
    "Where is the jacket from?",
    "The colours work so well together.",
    "Great fit, 10/10 from me.",
    "Those shoes though.",
    "Very clean look.",
    "Would wear this every day.",
]

# Placeholder images; photos store a URL reference only.
IMAGE_URL_TEMPLATE = "https://picsum.photos/seed/{seed}/600/800"
