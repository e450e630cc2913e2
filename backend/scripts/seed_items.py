#!/usr/bin/env python3
"""
Load items from a JSON catalogue into a running server through the HTTP API.

The store is in-memory, so this talks to the live process instead of touching
storage directly. Items whose name already exists (case-insensitive) are skipped.

Usage:
    python scripts/seed_items.py --file catalogue.json --base http://127.0.0.1:8080
"""
import argparse
import json
import os
import sys

import requests

DEFAULT_BASE = os.environ.get("STOREFRONT_BASE", "http://127.0.0.1:8080")


def _normalize_entry(entry):
    """Return a dict with keys: name, status, image"""
    name = entry.get("name") or entry.get("title") or ""
    status = entry.get("status")
    image = entry.get("image")
    if not image:
        imgs = entry.get("images") or entry.get("image_urls") or []
        image = imgs[0] if isinstance(imgs, (list, tuple)) and len(imgs) > 0 else None
    return {"name": name.strip(), "status": status, "image": image}


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    if isinstance(data, dict):
        source_list = data["items"] if isinstance(data.get("items"), list) else list(data.values())
    elif isinstance(data, list):
        source_list = data
    else:
        source_list = []
    return [e for e in (_normalize_entry(x) for x in source_list) if e["name"]]


def login(base: str, username: str, password: str) -> str:
    r = requests.post(f"{base}/api/users/login", json={"username": username, "password": password}, timeout=10)
    r.raise_for_status()
    return r.json()["access_token"]


def existing_names(base: str):
    names = set()
    page = 1
    while True:
        r = requests.get(f"{base}/api/items", params={"page": page, "size": 100}, timeout=10)
        r.raise_for_status()
        body = r.json()
        names.update(i["name"].lower() for i in body["items"])
        if page >= body["pages"]:
            return names
        page += 1


def seed_from_file(path: str, base: str, username: str, password: str) -> int:
    entries = load_entries(path)
    token = login(base, username, password)
    headers = {"Authorization": f"Bearer {token}"}
    seen = existing_names(base)

    created = 0
    for entry in entries:
        if entry["name"].lower() in seen:
            continue
        r = requests.post(f"{base}/api/items", json=entry, headers=headers, timeout=10)
        r.raise_for_status()
        seen.add(entry["name"].lower())
        created += 1
    print("Seeded items:", created)
    return created


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to a JSON list of items (or {'items': [...]})")
    parser.add_argument("--base", default=DEFAULT_BASE)
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", default="Admin@123")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    seed_from_file(args.file, args.base, args.username, args.password)
