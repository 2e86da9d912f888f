"""
Site settings (for reference)

Table: site_settings
- id: SERIAL (primary key)
- setting_key: TEXT (unique)
- setting_value: TEXT
- updated_at: TIMESTAMP
- created_at: TIMESTAMP

Every value is stored as text; booleans as 'true'/'false'. Keys in use:
site_name, site_favicon, seo_title, seo_description, seo_keywords, seo_author,
open_graph_title, open_graph_description, open_graph_image, twitter_title,
twitter_description, twitter_image, enable_shipping, international_shipping,
single_item_shipping_cad, single_item_shipping_usd, combined_shipping_cad,
combined_shipping_usd, combined_shipping_enabled, combined_shipping_threshold.
"""
