"""
Site content database model (for reference)

Table: site_content
- id: UUID (primary key)
- section: TEXT (homepage section or page id, e.g. 'hero', 'about', 'privacy-policy')
- key: TEXT
- content_type: TEXT ('text', 'html', 'image', 'json')
- value: TEXT
- metadata: JSONB
- is_active: BOOLEAN
- created_at: TIMESTAMP
- updated_at: TIMESTAMP

Unique: (section, key)
"""
