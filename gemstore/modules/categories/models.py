"""
Category database model (for reference)

Table: categories
- id: UUID (primary key)
- name: TEXT (unique)
- slug: TEXT (unique)
- description: TEXT
- image_url: TEXT
- sort_order: INTEGER (default 0)
- is_active: BOOLEAN (default true)
- created_at: TIMESTAMP
- updated_at: TIMESTAMP

Products are linked through product_categories (see products.models).
"""
