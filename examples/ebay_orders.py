"""
eBay Order Normalization
Use case: Turn a mixed bag of eBay order payloads into canonical purchases.
- Fulfillment REST orders with {value, currency} money objects
- Trading API transactions (XML converted to JSON)
- Flat CSV-style records with "£"-prefixed price strings
- One malformed record that is skipped without failing the batch
"""

import json

from purchase_mapping.core import OrderMapper, PandasBackend, summarize

data_json = r'''
{
  "orders": [
    {
      "orderId": "12-34567-89012",
      "creationTime": "2024-05-02T18:45:10.000Z",
      "orderFulfillmentStatus": "FULFILLED",
      "seller": {"username": "techdeals_uk"},
      "pricingSummary": {"deliveryCost": {"value": "3.99", "currency": "GBP"}},
      "lineItems": [
        {
          "title": "Apple AirPods Pro 2nd Generation",
          "legacyItemId": "155512345678",
          "quantity": 1,
          "lineItemCost": {"value": "179.00", "currency": "GBP"}
        }
      ]
    },
    {
      "OrderID": "998877",
      "CreatedTime": "2023-11-20T08:00:00Z",
      "transactionArray": {
        "transaction": [
          {
            "Item": {"Title": "Bose QuietComfort 45 Headphones", "ItemID": "334455"},
            "QuantityPurchased": "1",
            "TransactionPrice": {"value": 229.95}
          }
        ]
      }
    },
    {
      "Item title": "Sonos Play:5 Speaker",
      "Sale Price": "£299.00",
      "Shipping cost": "£0.00",
      "Date": "2024-01-01",
      "Seller Username": "hifi_outlet"
    },
    "not-an-order"
  ]
}
'''

if __name__ == "__main__":
    payload = json.loads(data_json)

    mapper = OrderMapper()
    result = mapper.map_batch(payload)
    print(f"Mapped {result.mapped_count} of {result.input_count} (skipped {result.skipped_count})")
    for skipped in result.skipped:
        print(f"  skipped #{skipped.index}: {skipped.error}")

    backend = PandasBackend()
    df = backend.to_dataframe(result.purchases)
    print(df[["identifier", "productName", "brand", "totalPaid", "deliveryStatus"]].to_string(index=False))
    print(backend.line_items_frame(result.purchases).to_string(index=False))

    print(summarize(result.purchases))
    df.to_csv("ebay_purchases.csv", index=False)
