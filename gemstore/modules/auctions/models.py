"""
Auction database model (for reference)

Table: auctions
- id: UUID (primary key)
- title: TEXT
- description: TEXT
- images: TEXT[]
- video_url: TEXT
- featured_image_index: INTEGER
- starting_bid: NUMERIC
- current_bid: NUMERIC
- reserve_price: NUMERIC (nullable)
- bid_count: INTEGER
- start_time: TIMESTAMPTZ
- end_time: TIMESTAMPTZ
- status: TEXT ('pending', 'active', 'ended')
- is_active: BOOLEAN
- metadata: JSONB
- created_at: TIMESTAMP
- updated_at: TIMESTAMP
"""
