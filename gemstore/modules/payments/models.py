"""
Payment event database model (for reference)

Table: payment_events
- id: UUID (primary key)
- provider: TEXT ('stripe')
- event_type: TEXT (e.g. 'payment_intent.succeeded')
- payment_id: TEXT (Stripe PaymentIntent id)
- amount: INTEGER (minor units, as reported by the provider)
- currency: TEXT
- status: TEXT ('succeeded', 'failed')
- customer_email: TEXT
- customer_name: TEXT
- metadata: JSONB (intent metadata such as items_count, plus the provider event_id)
- error_message: TEXT (failed payments only, otherwise NULL)
- created_at: TIMESTAMP

Orders themselves are written by POST /orders once checkout completes; the
webhook only keeps the provider's view of each payment for reconciliation.
"""
