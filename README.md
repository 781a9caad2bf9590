# storefront

Building blocks for a small shop, each split into a domain model, an
application core holding the business rules, and adapters around it.

- **inventory** keeps products, their prices and their stock.
- **payment** takes a charge for an order.
- **order** holds the order model, its configuration, and adapters that let
  order code call the inventory and payment services.

The cores talk to the outside world only through small interfaces
(`DBPort`, `PaymentAPI`, `InventoryClient`, `PaymentClient`), so a storage
back end or a remote client can be swapped without touching the rules.

## Inventory

`storefront.inventory.domain` defines `Product`, `ProductQuantity` and
`ProductStock`. `new_product(name, description, unit_price_cents,
quantity_in_stock)` builds a product with a fresh time-ordered (version 7)
UUID as its code and the current time in milliseconds as its timestamps.

`storefront.inventory.memory_db.InMemoryDB` is a thread-safe store that
satisfies `DBPort`: `get_products_by_code`, `update_product_stock_quantities`
and `save_products` (which inserts or replaces by product code).

`storefront.inventory.application.InventoryApplication` holds the stock rules:

- `get_product_details(product_codes)` returns the known products; unknown
  codes are left out.
- `check_product_stock_quantity(product_quantities)` reports, for each
  requested product that exists, the quantity in stock and whether the
  requested quantity can be met.
- `reduce_product_stock_quantity(product_quantities)` takes the requested
  quantities out of stock and reports what is left. If any product would go
  below zero it raises `InsufficientStockError` and changes nothing. A product
  whose stock reaches zero is reported as no longer available.
- `populate_test_data()` stores five sample products with fixed codes and
  returns them.

```python
from storefront.inventory.application import InventoryApplication
from storefront.inventory.domain import ProductQuantity
from storefront.inventory.memory_db import InMemoryDB

app = InventoryApplication(InMemoryDB())
app.populate_test_data()

laptop = "0190e8c4-258e-767f-94a7-b5183aea900f"
print(app.check_product_stock_quantity([ProductQuantity(laptop, 3)]))
print(app.reduce_product_stock_quantity([ProductQuantity(laptop, 3)]))
```

`storefront.inventory.rpc.InventoryService` wraps the application in
request/response dataclasses (`GetProductDetailsRequest`,
`CheckProductStockQuantityRequest`, `ReduceProductStockQuantityRequest` and
their responses). Failures come back as `storefront.status.RpcError` with a
`StatusCode`: `INVALID_ARGUMENT` for a failed stock check, `INTERNAL`
otherwise. `str()` of an `RpcError` reads
`rpc error: code = Internal desc = ...`.

## Payment

`storefront.payment.domain.new_payment(customer_id, order_id, total_price_cents)`
builds a `Payment` in `PaymentStatus.PENDING` with a random UUID as its id.
`storefront.payment.application.PaymentApplication.charge(payment)` records
the payment and returns it. `storefront.payment.rpc.PaymentService` answers a
`CreatePaymentRequest` with a `CreatePaymentResponse` holding the new
payment's id; a failing charge is raised as an `RpcError` with
`StatusCode.INTERNAL`.

## Orders

`storefront.order.domain` defines `Order`, `OrderItem`, `OrderStatus`,
`ProductPrice` and `ProductStock`. `new_order(customer_id, order_items)`
builds a pending order with a fresh time-ordered id.

`storefront.order.clients` adapts service clients for order code:

- `InventoryAdapter(client)` offers `get_product_prices(product_codes)`,
  `check_product_stock_quantities(order_items)` and
  `reduce_product_stock_quantities(order_items)`.
- `PaymentAdapter(client)` offers `create_payment(order, total_price_cents)`.

Any object with the methods of `InventoryClient` or `PaymentClient` will do,
including the services above. Both adapters are context managers; `close()`
calls the client's own `close()` if it has one and logs, rather than raises,
any failure.

```python
from storefront.inventory.application import InventoryApplication
from storefront.inventory.memory_db import InMemoryDB
from storefront.inventory.rpc import InventoryService
from storefront.order.clients import InventoryAdapter, PaymentAdapter
from storefront.order.domain import OrderItem, new_order
from storefront.payment.application import PaymentApplication
from storefront.payment.rpc import PaymentService

inventory = InventoryApplication(InMemoryDB())
inventory.populate_test_data()

laptop = "0190e8c4-258e-767f-94a7-b5183aea900f"
order = new_order("customer-1", [OrderItem(laptop, 1)])

with InventoryAdapter(InventoryService(inventory)) as stock, \
        PaymentAdapter(PaymentService(PaymentApplication())) as payments:
    prices = stock.get_product_prices([laptop])
    print(stock.check_product_stock_quantities(order.order_items))
    payments.create_payment(order, prices[0].unit_price_cents)
    stock.reduce_product_stock_quantities(order.order_items)
```

`inventory_address(config)` and `payment_address(config)` give the
`host:port` of each upstream service from an order `Config`.

## Configuration

`storefront.payment.config.load_config(config_dir=".", environ=None)` and
`storefront.order.config.load_config(config_dir=".", environ=None)` build a
frozen `Config` from defaults, a YAML file in `config_dir`
(`paymentservice-config.yaml` / `.yml` or `orderservice-config.yaml` / `.yml`,
keys case-insensitive) and the environment (`os.environ` unless `environ` is
given). Environment variables carry a `PAYMENT_` or `ORDER_` prefix and win
over the file; empty ones are ignored. A missing or unreadable file is logged
and the defaults are used.

| Setting | Payment default | Order default |
| --- | --- | --- |
| `GRPC_PORT` | 9000 | 9002 |
| `APPLICATION_MODE` | `development` | `development` |
| `INVENTORY_SERVICE_HOST` | | `localhost` |
| `INVENTORY_SERVICE_GRPC_PORT` | | 9001 |
| `PAYMENT_SERVICE_HOST` | | `localhost` |
| `PAYMENT_SERVICE_GRPC_PORT` | | 9000 |

A port that is not a whole number raises `ConfigError` (a `ValueError`).
`Config.is_development_mode()` tells whether the mode is `development`.

## What this package does not do

- It has no order workflow: nothing here chains price lookup, stock check,
  payment and stock reduction into one "place order" call, and there is no
  order service answering requests. The adapters above are the pieces such
  code would use.
- The services are plain Python objects. There is no network server or
  transport, and no command to start anything; the port settings are read
  but nothing listens on them.
- Products are kept in memory only and are lost when the process ends.