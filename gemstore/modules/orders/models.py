# Supabase table: orders
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

orders:
- id: uuid (primary key, default gen_random_uuid())
- customer_email: text (not null)
- customer_name: text (not null)
- shipping_address: jsonb - {address, apartment, city, state, zipCode, country}
- items: jsonb - cart lines as sent by checkout ({id, name, price, quantity, ...})
- payment_details: jsonb - {method, payment_id, amount, currency, crypto_* for crypto}
- subtotal: numeric
- shipping: numeric
- tax: numeric
- total: numeric
- status: text (default 'confirmed')
- is_test_order: boolean (not null) - sandbox vs production payment
- created_at: timestamptz (default now())

Stored procedure used for inventory reservation (atomic per product,
clamped at zero):

create or replace function decrement_inventory(p_product_id uuid, p_quantity int)
returns void language sql as $$
  update products
     set inventory = greatest(0, coalesce(inventory, 0) - p_quantity)
   where id = p_product_id;
$$;
"""
