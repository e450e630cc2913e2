"""
Fire concurrent requests at a running server to watch the store's invariants hold.

    add     N workers add the same item to one user's cart: expect one 201, rest 409
    orders  N workers check out the same cart: expect one 201, rest 400
"""
import argparse
import concurrent.futures
import os
from collections import Counter
from uuid import uuid4

import requests

BASE = os.environ.get("STOREFRONT_BASE", "http://127.0.0.1:8080")


def make_user():
    username = f"load-{uuid4().hex[:8]}"
    password = "secret-pass"
    requests.post(f"{BASE}/api/users", json={"username": username, "password": password}, timeout=10).raise_for_status()
    r = requests.post(f"{BASE}/api/users/login", json={"username": username, "password": password}, timeout=10)
    r.raise_for_status()
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def add_task(i, headers, item_id):
    try:
        r = requests.post(f"{BASE}/api/cart/items", json={"item_id": item_id}, headers=headers, timeout=10)
        return (i, "add", r.status_code, r.text)
    except requests.RequestException as e:
        return (i, "add", "ERR", str(e))


def order_task(i, headers):
    try:
        r = requests.post(f"{BASE}/api/orders", headers=headers, timeout=10)
        return (i, "order", r.status_code, r.text)
    except requests.RequestException as e:
        return (i, "order", "ERR", str(e))


def run_add_concurrent(workers, item_id):
    headers = make_user()
    print(f"Running add test: workers={workers}, item_id={item_id}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(add_task, i, headers, item_id) for i in range(workers)]
        results = [f.result() for f in futures]
    print("Status codes:", Counter(r[2] for r in results))
    cart = requests.get(f"{BASE}/api/cart", headers=headers, timeout=10).json()
    print("Lines in cart:", cart["total_items"])


def run_order_concurrent(workers, item_id):
    headers = make_user()
    requests.post(f"{BASE}/api/cart/items", json={"item_id": item_id}, headers=headers, timeout=10).raise_for_status()
    print(f"Running order test: workers={workers}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(order_task, i, headers) for i in range(workers)]
        results = [f.result() for f in futures]
    print("Status codes:", Counter(r[2] for r in results))
    orders = requests.get(f"{BASE}/api/orders", headers=headers, timeout=10).json()
    print("Orders created:", len(orders))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrency test tool (add or orders).")
    sub = parser.add_subparsers(dest="mode", required=True)

    a = sub.add_parser("add")
    a.add_argument("--item", type=int, default=1)
    a.add_argument("--workers", type=int, default=8)

    o = sub.add_parser("orders")
    o.add_argument("--item", type=int, default=1)
    o.add_argument("--workers", type=int, default=8)

    args = parser.parse_args()

    if args.mode == "add":
        run_add_concurrent(args.workers, args.item)
    elif args.mode == "orders":
        run_order_concurrent(args.workers, args.item)
