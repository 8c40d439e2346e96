"""
Purchases App - Household Purchase Records

Each purchase line records what was bought, where, when and for how
much. Purchases belong to the household member who entered them.

Key Features:
- Purchase CRUD with amount derived from price and quantity
- Filtering by category, store, date range and text search
- JSON export of the filtered history
- Random test data and linking of legacy free-text categories

Architecture:
- Models: Purchase
- Services: filter_purchases, create_purchase, update_purchase, ...
- Views: PurchaseViewSet
- Permissions: IsPurchaseOwner
"""
