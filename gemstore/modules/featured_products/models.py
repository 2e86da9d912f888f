"""
Featured product cards (for reference)

Table: featured_products
- id: UUID (primary key)
- name: TEXT
- type: TEXT (gem type shown on the card)
- description: TEXT
- image_url: TEXT
- card_color: TEXT (hex background colour)
- price: NUMERIC
- original_price: NUMERIC
- product_id: TEXT (optional link to products.id)
- sort_order: INTEGER
- is_active: BOOLEAN
- created_at: TIMESTAMP

The public endpoint builds its cards from products flagged as featured; this
table holds the cards curated by hand in the admin panel.
"""
