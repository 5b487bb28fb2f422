from purchase_mapping.core import (
    BrandCatalog, MapperConfig, OrderMapper, ShapeRegistry,
    get_registry, item_shape,
)


def main():
    # A marketplace export that nests its items under "basket.entries"
    order = {
        "orderDate": "2024-06-01T10:00:00Z",
        "basket": {
            "entries": [
                {"title": "LEGO Star Wars X-Wing 75355", "code": "75355", "count": 2, "each": "£179.99"},
            ]
        },
        "orderId": "9",
    }

    registry = ShapeRegistry()
    registry.register(item_shape(
        "vinted_basket",
        "basket.entries",
        title=("title",),
        sku=("code",),
        quantity=("count",),
        unit_price=("each",),
    ))
    # keep the built-in shapes as fallbacks
    for shape in get_registry().shapes():
        registry.register(shape)

    brands = BrandCatalog.from_dict({
        "default_brand": "Unknown",
        "brands": [
            {"name": "LEGO", "keywords": ["lego"], "category": "Toys"},
        ],
    })

    mapper = OrderMapper(
        MapperConfig(platform="Vinted", source="vinted-export", id_prefix="VNT", brand_catalog=brands),
        registry=registry,
    )

    purchase = mapper.map_orders([order])[0]
    print(purchase.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    main()
