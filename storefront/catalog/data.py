"""Seed catalog used by the mock backend."""
from .models import Product
from .slugs import create_slug

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"


def _variants(product_id: str, rows: list[tuple]) -> list[dict]:
    return [
        {"id": f"{product_id}-{i}", "name": name, "price": price, "sku": sku, "in_stock": in_stock}
        for i, (name, price, sku, in_stock) in enumerate(rows, start=1)
    ]


_SEED = [
    {
        "id": "1",
        "name": "Classic White Sneakers",
        "description": (
            "Clean and timeless design meets comfort with our Classic White Sneakers. "
            "Made with premium materials and designed for all-day wear, these sneakers "
            "feature a padded insole, durable outsole, and minimalist aesthetic that goes "
            "with everything in your wardrobe."
        ),
        "short_description": "Timeless white sneakers with premium comfort and versatile style.",
        "price": "89.99",
        "compare_at_price": "109.99",
        "rating": 4.8,
        "review_count": 125,
        "images": [
            _IMG.format("1600269452121-4f2416e55c28"),
            _IMG.format("1595950653106-6c9ebd614d3a"),
            _IMG.format("1600185365926-3a2ce3cdb9eb"),
            _IMG.format("1595341888016-a392ef81b7de"),
        ],
        "category": "Footwear",
        "tags": ["Sneakers", "Casual", "White", "Unisex"],
        "featured": True,
        "best_seller": True,
        "new": False,
        "variants": _variants("1", [
            ("US 7 / EU 40", "89.99", "WS-CL-07", True),
            ("US 8 / EU 41", "89.99", "WS-CL-08", True),
            ("US 9 / EU 42", "89.99", "WS-CL-09", True),
            ("US 10 / EU 43", "89.99", "WS-CL-10", True),
            ("US 11 / EU 44", "89.99", "WS-CL-11", False),
        ]),
    },
    {
        "id": "2",
        "name": "Everyday Tote Bag",
        "description": (
            "Our Everyday Tote Bag is designed for versatility and durability. Made from "
            "sustainable canvas with reinforced leather handles, this spacious tote features "
            "an interior zippered pocket and two slip pockets."
        ),
        "short_description": "Durable canvas tote with premium leather handles and organized interior.",
        "price": "49.99",
        "rating": 4.6,
        "review_count": 98,
        "images": [
            _IMG.format("1590874103328-eac38a683ce7"),
            _IMG.format("1605733513597-a8f8341084e6"),
            _IMG.format("1622560480654-d96214fdc887"),
        ],
        "category": "Accessories",
        "tags": ["Bags", "Canvas", "Everyday", "Unisex"],
        "featured": False,
        "best_seller": True,
        "new": False,
        "variants": _variants("2", [
            ("Natural Canvas", "49.99", "TB-EV-NAT", True),
            ("Black Canvas", "49.99", "TB-EV-BLK", True),
            ("Navy Canvas", "49.99", "TB-EV-NAV", True),
        ]),
    },
    {
        "id": "3",
        "name": "Premium Wireless Headphones",
        "description": (
            "Experience superior sound quality with our Premium Wireless Headphones. "
            "Featuring active noise cancellation, 30-hour battery life, and memory foam "
            "ear cushions, these headphones deliver immersive audio in exceptional comfort."
        ),
        "short_description": "Noise-cancelling wireless headphones with premium sound and all-day battery.",
        "price": "179.99",
        "compare_at_price": "229.99",
        "rating": 4.9,
        "review_count": 213,
        "images": [
            _IMG.format("1505740420928-5e560c06d30e"),
            _IMG.format("1583394838336-acd977736f90"),
            _IMG.format("1487215078519-e21cc028cb29"),
        ],
        "category": "Electronics",
        "tags": ["Headphones", "Wireless", "Audio", "Noise-Cancelling"],
        "featured": True,
        "best_seller": True,
        "new": False,
        "variants": _variants("3", [
            ("Matte Black", "179.99", "HP-PW-BLK", True),
            ("Silver", "179.99", "HP-PW-SLV", True),
            ("Navy Blue", "199.99", "HP-PW-NAV", True),
        ]),
    },
    {
        "id": "4",
        "name": "Organic Cotton T-Shirt",
        "description": (
            "Our Organic Cotton T-Shirt offers premium comfort with environmental "
            "responsibility. Made from 100% GOTS-certified organic cotton with a relaxed fit "
            "and pre-shrunk fabric."
        ),
        "short_description": "Sustainably made, comfortable 100% organic cotton tee with relaxed fit.",
        "price": "29.99",
        "rating": 4.7,
        "review_count": 184,
        "images": [
            _IMG.format("1521572163474-6864f9cf17ab"),
            _IMG.format("1622445275463-afa2ab738c34"),
            _IMG.format("1503341504253-dff4815485f1"),
        ],
        "category": "Clothing",
        "tags": ["T-Shirts", "Organic", "Sustainable", "Basics"],
        "featured": False,
        "best_seller": False,
        "new": True,
        "variants": _variants("4", [
            ("White - Small", "29.99", "TS-OC-WS", True),
            ("White - Medium", "29.99", "TS-OC-WM", True),
            ("White - Large", "29.99", "TS-OC-WL", True),
            ("Black - Small", "29.99", "TS-OC-BS", True),
            ("Black - Medium", "29.99", "TS-OC-BM", True),
            ("Black - Large", "29.99", "TS-OC-BL", False),
        ]),
    },
    {
        "id": "5",
        "name": "Smart Fitness Watch",
        "description": (
            "Track your fitness journey with precision using our Smart Fitness Watch. "
            "Monitors heart rate, sleep quality, and activity levels, with built-in GPS "
            "and up to 7 days of battery life."
        ),
        "short_description": "Advanced fitness tracker with heart rate monitoring and 7-day battery life.",
        "price": "129.99",
        "compare_at_price": "149.99",
        "rating": 4.5,
        "review_count": 156,
        "images": [
            _IMG.format("1617043786394-f977fa12eddf"),
            _IMG.format("1508685096489-7aacd43bd3b1"),
            _IMG.format("1575311373937-040b8e1fd6b4"),
        ],
        "category": "Electronics",
        "tags": ["Wearables", "Fitness", "Smart Watches", "Tech"],
        "featured": True,
        "best_seller": False,
        "new": True,
        "variants": _variants("5", [
            ("Black", "129.99", "SW-FT-BLK", True),
            ("Silver", "129.99", "SW-FT-SLV", True),
            ("Rose Gold", "139.99", "SW-FT-RSG", True),
        ]),
    },
    {
        "id": "6",
        "name": "Sustainable Water Bottle",
        "description": (
            "Stay hydrated responsibly with our Sustainable Water Bottle. Made from "
            "BPA-free, recycled stainless steel, it keeps drinks cold for 24 hours or hot "
            "for 12 hours."
        ),
        "short_description": "Eco-friendly insulated bottle keeping drinks cold for 24hrs or hot for 12hrs.",
        "price": "34.99",
        "rating": 4.7,
        "review_count": 109,
        "images": [
            _IMG.format("1602143407151-7111542de6e8"),
            _IMG.format("1523362628745-0c100150b504"),
            _IMG.format("1589365278144-c9e705f843ba"),
        ],
        "category": "Lifestyle",
        "tags": ["Eco-Friendly", "Water Bottles", "Sustainable", "Drinkware"],
        "featured": False,
        "best_seller": True,
        "new": False,
        "variants": _variants("6", [
            ("Ocean Blue - 20oz", "34.99", "WB-SS-BL20", True),
            ("Forest Green - 20oz", "34.99", "WB-SS-GR20", True),
            ("Matte Black - 20oz", "34.99", "WB-SS-BK20", True),
            ("Ocean Blue - 32oz", "39.99", "WB-SS-BL32", True),
            ("Forest Green - 32oz", "39.99", "WB-SS-GR32", False),
            ("Matte Black - 32oz", "39.99", "WB-SS-BK32", True),
        ]),
    },
    {
        "id": "7",
        "name": "Minimalist Leather Wallet",
        "description": (
            "Our Minimalist Leather Wallet combines sleek design with practical "
            "functionality. Full-grain leather, RFID-blocking, and room for up to 8 cards."
        ),
        "short_description": "Slim RFID-blocking leather wallet with room for cards and cash.",
        "price": "59.99",
        "rating": 4.8,
        "review_count": 87,
        "images": [
            _IMG.format("1627123424574-724758594e93"),
            _IMG.format("1620833127432-2a0d9eacea5b"),
            _IMG.format("1612875895771-c3fa704bb9e6"),
        ],
        "category": "Accessories",
        "tags": ["Wallets", "Leather", "RFID", "Minimalist"],
        "featured": False,
        "best_seller": False,
        "new": True,
        "variants": _variants("7", [
            ("Black", "59.99", "WL-ML-BLK", True),
            ("Brown", "59.99", "WL-ML-BRN", True),
            ("Tan", "59.99", "WL-ML-TAN", True),
        ]),
    },
    {
        "id": "8",
        "name": "Ceramic Pour-Over Coffee Set",
        "description": (
            "Elevate your morning ritual with our Ceramic Pour-Over Coffee Set: a "
            "handcrafted dripper, server, and two mugs in high-fired matte stoneware."
        ),
        "short_description": "Handcrafted stoneware coffee set for the perfect pour-over brew.",
        "price": "79.99",
        "compare_at_price": "99.99",
        "rating": 4.9,
        "review_count": 62,
        "images": [
            _IMG.format("1519683109079-d5f539e1542f"),
            _IMG.format("1495474472287-4d71bcdd2085"),
            _IMG.format("1572119865084-43c285814d63"),
        ],
        "category": "Home",
        "tags": ["Coffee", "Ceramic", "Pour-Over", "Kitchen"],
        "featured": True,
        "best_seller": False,
        "new": True,
        "variants": _variants("8", [
            ("White", "79.99", "CF-PO-WHT", True),
            ("Black", "79.99", "CF-PO-BLK", True),
            ("Terra Cotta", "89.99", "CF-PO-TER", False),
        ]),
    },
]


def load_seed_products() -> list[Product]:
    """Fresh list of the seed products; callers may mutate the list freely."""
    return [Product(slug=create_slug(row["name"]), **row) for row in _SEED]
