# Supabase tables: products, product_categories
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

products:
- id: uuid (primary key)
- name: text (not null)
- description: text (default '')
- price: numeric(7,2) (not null)
- sale_price: numeric(7,2) (nullable)
- on_sale: boolean (default false)
- category: text (legacy free-text category, default 'uncategorized')
- images: text[] (public storage URLs)
- video_url: text (nullable)
- tags: text[]
- inventory: integer (default 0)
- sku: text (unique)
- weight: numeric(8,3) (grams, nullable)
- dimensions: jsonb (nullable)
- is_active: boolean (default true) - false = soft deleted
- featured: boolean (default false)
- metadata: jsonb - featured_image_index, frontend_visible, view_count, ...
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

product_categories:
- id: uuid (primary key)
- product_id: uuid (references products.id on delete cascade)
- category_id: uuid (references categories.id)
"""
