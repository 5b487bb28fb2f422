import logging

from purchase_mapping.core import MapperConfig, OrderMapper, PandasBackend
from purchase_mapping.rest.client import PurchasesClient
from purchase_mapping.rest.exceptions import PurchasesClientError, PurchasesRateLimitError


def main():
    logging.basicConfig(level=logging.INFO)

    mapper = OrderMapper(MapperConfig(logger=logging.getLogger("purchases.sync")))

    try:
        with PurchasesClient(base_url="https://purchases.example.com/api") as client:
            payload = client.fetch_purchases(limit=50, status="Shipped")

    except PurchasesRateLimitError:
        print("Rate limited, try again later.")
        return

    except PurchasesClientError as e:
        print(f"Error: {e}")
        return

    result = mapper.map_batch(payload)
    if result.collection_key is not None:
        print(f"Orders read from '{result.collection_key}'")

    if not result.purchases:
        print("Nothing to map.")
        return

    df = PandasBackend().to_dataframe(result.purchases)
    print(df.to_string())

    # records keyed by identifier are safe to upsert repeatedly
    for purchase in result.purchases:
        record = purchase.to_record()
        print(record["_id"], record["totalPaid"])


if __name__ == "__main__":
    main()
