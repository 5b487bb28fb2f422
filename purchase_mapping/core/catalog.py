"""
Candidate paths for every canonical purchase field, highest priority first.

Covers the microservice purchase shape, the Fulfillment REST and Trading XML
order shapes, and flattened CSV transaction exports ("Item Title", ...).
"""
from __future__ import annotations

from .fields import FieldSpec, MoneySpec

DEFAULT_TITLE = "eBay Purchase"
DEFAULT_ITEM_TITLE = "eBay Item"
DEFAULT_SELLER = "Unknown"
DEFAULT_STATUS = "Despatched"

TITLE = FieldSpec(
    "title",
    (
        "title", "productName", "description", "itemTitle", "item.title",
        "Item.Title", "name", "Item Title", "Item title",
    ),
    default=DEFAULT_TITLE,
)

SELLER_USERNAME = FieldSpec(
    "seller_username",
    (
        "sellerUserID", "seller.username", "seller.userId", "seller",
        "sellerName", "sellerUsername", "Seller.UserID", "Seller Username",
    ),
    default=DEFAULT_SELLER,
)

SELLER_ID = FieldSpec(
    "seller_id",
    ("sellerUserID", "seller_id", "seller.userId", "Seller.UserID"),
    default=None,
    kind="id",
)

ORDER_ID = FieldSpec(
    "order_id",
    ("orderId", "order_id", "id", "OrderID", "Order ID"),
    default=None,
    kind="id",
)

TRANSACTION_ID = FieldSpec(
    "transaction_id",
    ("transactionId", "transaction_id", "TransactionID", "Transaction ID"),
    default=None,
    kind="id",
)

ITEM_ID = FieldSpec(
    "item_id",
    ("itemId", "item_id", "legacyItemId", "ItemID", "Item.ItemID", "Item ID"),
    default=None,
    kind="id",
)

ORDER_DATE = FieldSpec(
    "order_date",
    (
        "transactionDate", "creationTime", "orderCreationDate", "orderDate",
        "purchaseDate", "paidDate", "endTime", "createdTime", "CreatedTime",
        "date", "Date", "transactionArray.transaction[0].createdDate",
    ),
    default=None,
)

STATUS = FieldSpec(
    "status",
    (
        "itemStatus", "orderStatus", "orderFulfillmentStatus", "status",
        "OrderStatus", "Shipping Status",
    ),
    default=DEFAULT_STATUS,
)

TRACKING_REF = FieldSpec(
    "tracking_ref",
    ("trackingNumber", "tracking_ref", "trackingRef", "ShipmentTrackingNumber"),
    default=None,
    kind="id",
)

CARRIER = FieldSpec("carrier", ("shippingCarrier", "carrier", "ShippingCarrierUsed"), default=None)

SHIPPED_TIME = FieldSpec("shipped_time", ("shippedTime", "shipped_time", "ShippedTime"), default=None)

QUANTITY = FieldSpec("quantity", ("quantity", "QuantityPurchased", "Quantity", "qty"), default=None)

PRICE = MoneySpec(
    "price",
    (
        "price", "currentPrice", "CurrentPrice", "sellingStatus.currentPrice",
        "salePrice", "Sale Price", "Sale price", "TransactionPrice",
    ),
)

SHIPPING = MoneySpec(
    "shipping",
    (
        "shipping_cost", "shippingCost", "Shipping Cost", "Shipping cost",
        "shipping.cost", "shippingDetails.shippingServiceOptions.shippingServiceCost",
        "ShippingServiceCost", "pricingSummary.deliveryCost", "ActualShippingCost",
    ),
)

ITEM_SHIPPING = MoneySpec(
    "item_shipping",
    ("shippingCost", "ShippingServiceCost", "deliveryCost.shippingCost", "ActualShippingCost"),
)

GRAND_TOTAL = MoneySpec(
    "grand_total",
    (
        "total", "orderTotal", "pricingSummary.total", "amounts.total",
        "priceSummary.total", "totalAmount", "amountPaid", "checkoutTotal",
        "orderCostSummary.total", "Total",
    ),
)

# synthesized line items fall back to the item price when there is no total
ORDER_TOTAL = MoneySpec("order_total", GRAND_TOTAL.paths + PRICE.paths)

ALL_FIELDS = (
    TITLE, SELLER_USERNAME, SELLER_ID, ORDER_ID, TRANSACTION_ID, ITEM_ID,
    ORDER_DATE, STATUS, TRACKING_REF, CARRIER, SHIPPED_TIME, QUANTITY,
)
ALL_MONEY = (PRICE, SHIPPING, ITEM_SHIPPING, GRAND_TOTAL, ORDER_TOTAL)
