"""Launch the stateful-checkbox dashboard with a generated orders table."""

import logging

import numpy as np
import pandas as pd
import stateful_checkbox as sc

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

rng = np.random.default_rng(42)
orders = pd.DataFrame({
    "order_id": np.arange(1000, 1250),
    "customer": rng.choice(["acme", "globex", "initech", "umbrella"], 250),
    "amount": rng.uniform(5, 500, 250).round(2),
})

print(f"Orders: {len(orders)} rows")
print("Selection persisted in data/selection.json")
print("Launching dashboard...")

sc.explore(
    orders,
    state_key="orders_grid",
    record_index_field="order_id",
    provider=sc.JsonFileProvider("data/selection.json"),
    header_position="first",
)
