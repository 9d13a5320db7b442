"""Default categories and sample products used for seeding."""

from inventory_api.catalog.validation import ProductCreate

DEFAULT_CATEGORIES = [
    "Electronics",
    "Clothing",
    "Home & Garden",
    "Sports & Outdoors",
    "Books",
    "Health & Beauty",
    "Toys & Games",
    "Automotive",
    "Food & Beverages",
    "Office Supplies",
]

_DEFAULT_PRODUCT_DATA = [
    {
        "name": "Apple iPhone 14 Pro Max",
        "description": "6.7-inch Super Retina XDR display, A16 Bionic chip, 48MP Pro camera system, Ceramic Shield",
        "quantity": 10,
        "categories": ["Electronics", "Smartphones"],
    },
    {
        "name": "Nike Air Max 270 React",
        "description": "Comfortable running shoes with React foam cushioning and Air Max 270 unit",
        "quantity": 20,
        "categories": ["Clothing", "Sports & Outdoors", "Shoes"],
    },
    {
        "name": "Samsung 55-inch Smart TV",
        "description": "4K UHD resolution, Smart TV with Tizen OS, HDR10+ support",
        "quantity": 5,
        "categories": ["Electronics", "Home & Garden"],
    },
    {
        "name": "Ergonomic Mesh Office Chair",
        "description": "Adjustable lumbar support, breathable mesh back and 4D armrests",
        "quantity": 14,
        "categories": ["Office Supplies", "Home & Garden"],
    },
    {
        "name": "The Pragmatic Programmer",
        "description": "20th anniversary edition of the classic guide to software craftsmanship",
        "quantity": 42,
        "categories": ["Books"],
    },
    {
        "name": "Insulated Steel Water Bottle",
        "description": "1 litre double-wall vacuum bottle, keeps drinks cold for 24 hours",
        "quantity": 120,
        "categories": ["Sports & Outdoors", "Food & Beverages"],
    },
    {
        "name": "Wooden Building Blocks Set",
        "description": "100 piece set of sustainably sourced beech wood blocks for ages 3 and up",
        "quantity": 33,
        "categories": ["Toys & Games"],
    },
    {
        "name": "Vitamin C Brightening Serum",
        "description": "15% L-ascorbic acid serum with vitamin E and ferulic acid, 30 ml",
        "quantity": 60,
        "categories": ["Health & Beauty"],
    },
    {
        "name": "Cordless Car Vacuum Cleaner",
        "description": "Handheld 8000Pa vacuum with USB-C charging and washable HEPA filter",
        "quantity": 18,
        "categories": ["Automotive", "Electronics"],
    },
    {
        "name": "Single Origin Coffee Beans",
        "description": "1 kg whole bean Ethiopian Yirgacheffe, medium roast",
        "quantity": 75,
        "categories": ["Food & Beverages"],
    },
    {
        "name": "Smartwatch Fitness Tracker",
        "description": "Heart rate, SpO2 and sleep tracking with 10-day battery life",
        "quantity": 0,
        "categories": ["Electronics", "Sports & Outdoors", "Health & Beauty"],
    },
    {
        "name": "Vintage Collectible Stamp Album",
        "description": "Leather-bound album for philatelists, 64 pages of archival sleeves",
        "quantity": 3,
        "categories": ["Collectibles"],
    },
]


def default_products() -> list[ProductCreate]:
    """Validated default products, in listing order."""
    return [ProductCreate.model_validate(data) for data in _DEFAULT_PRODUCT_DATA]
