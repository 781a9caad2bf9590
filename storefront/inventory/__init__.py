"""Products, stock levels, an in-memory store and the inventory service."""