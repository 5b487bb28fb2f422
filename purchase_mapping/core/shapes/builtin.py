from __future__ import annotations

from ..registry import item_shape, register_item_shape

_GENERIC_TITLE = ("title", "productName", "Title", "name", "itemTitle")
_GENERIC_SKU = ("sku", "itemId", "ItemID", "legacyItemId")
_GENERIC_QTY = ("quantity", "QuantityPurchased", "Quantity")
_GENERIC_PRICE = ("unitPrice", "price", "TotalTransactionPrice", "CurrentPrice")


# Fulfillment REST orders: lineItemCost/total are {value, currency} objects
register_item_shape(item_shape(
    "fulfillment",
    "lineItems",
    title=_GENERIC_TITLE,
    sku=("sku", "legacyItemId", "lineItemId", "itemId"),
    quantity=("quantity",),
    unit_price=("unitPrice", "lineItemCost", "price", "total"),
    total_price=("total", "totalPrice", "TotalPrice"),
))

register_item_shape(item_shape(
    "order_line_items",
    "orderLineItems",
    title=_GENERIC_TITLE,
    sku=_GENERIC_SKU,
    quantity=_GENERIC_QTY,
    unit_price=_GENERIC_PRICE,
))

# Browse/Buy summaries
register_item_shape(item_shape(
    "line_item_summaries",
    "lineItemSummaries",
    title=_GENERIC_TITLE,
    sku=_GENERIC_SKU,
    quantity=_GENERIC_QTY,
    unit_price=_GENERIC_PRICE + ("netPrice", "itemPrice"),
))

register_item_shape(item_shape(
    "line_item",
    "lineItem",
    title=_GENERIC_TITLE,
    sku=_GENERIC_SKU,
    quantity=_GENERIC_QTY,
    unit_price=_GENERIC_PRICE,
))

# Trading API (XML converted to JSON): details sit under Item
register_item_shape(item_shape(
    "trading_transaction",
    "transactionArray.transaction",
    title=("Item.Title", "title", "Title"),
    sku=("Item.SKU", "Item.ItemID", "sku", "itemId"),
    quantity=("QuantityPurchased", "quantity"),
    unit_price=("TransactionPrice", "TotalTransactionPrice", "Item.SellingStatus.CurrentPrice", "price"),
    total_price=("TotalPrice", "totalPrice", "TotalTransactionPrice"),
))

# Third-party checkout platform purchase units
register_item_shape(item_shape(
    "purchase_units",
    "purchaseUnits[0].items",
    title=("name", "title", "description"),
    sku=("sku",),
    quantity=("quantity",),
    unit_price=("unit_amount", "unitAmount", "price"),
))
