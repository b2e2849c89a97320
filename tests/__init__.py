"""
Tests for the storefront API

Service tests drive CartService / OrderService directly against fresh
in-memory repositories; API tests go through FastAPI's TestClient with
the same repositories swapped in via dependency overrides.
"""
