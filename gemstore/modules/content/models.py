"""
Storefront content tables (for reference)

Table: faq
- id: UUID, question: TEXT, answer: TEXT, sort_order: INTEGER, is_active: BOOLEAN

Table: stats
- id: UUID, title: TEXT, value: TEXT, description: TEXT, icon: TEXT,
  data_source: TEXT (default 'manual'), is_real_time: BOOLEAN, sort_order: INTEGER,
  is_active: BOOLEAN

Table: gem_facts
- id: UUID, fact: TEXT, gem_type: TEXT, source: TEXT, is_active: BOOLEAN,
  created_at: TIMESTAMP

None of these tables has an updated_at column; updates only send the changed fields.
"""
