"""
Default Page Content Configuration
Texts for the storefront's static pages. Each page is a site_content section and
each entry a (key, value) field of that page.
Used by the seed script to populate/refresh the pages; admins edit them afterwards.
"""

DEFAULT_PAGES = {
    "about": [
        ("title", "About Us"),
        ("intro_paragraph", "Thanks for stopping by. We are a small Canadian gem dealer based in Alberta."),
        ("paragraph_1", "Every mineral and specimen in the shop is hand-selected, ethically sourced and personally inspected."),
        ("paragraph_2", "We don't list anything we wouldn't be proud to have in our own collection."),
        ("shipping_title", "Shipping & Processing"),
        ("shipping_item_1", "Processing time: 1-2 business days"),
        ("shipping_item_2", "Orders over $300 ship free within Canada and the US"),
        ("closing_paragraph", "Thank you for supporting a small business."),
    ],
    "privacy-policy": [
        ("title", "Privacy Policy"),
        ("last_updated", "Last updated: January 2025"),
        ("information_collect_title", "Information We Collect"),
        ("information_collect_content", "To fulfill your order you provide your name, e-mail address, postal address, payment information and the details of the products you order."),
        ("sharing_title", "Information Sharing and Disclosure"),
        ("sharing_intro", "We share your personal information only with the payment and shipping providers needed to complete your order, or where the law requires it."),
        ("retention_title", "How Long We Store Your Information"),
        ("retention_content", "We keep order data for five (5) years to meet tax and accounting obligations."),
        ("contact_title", "How to Contact Us"),
        ("contact_content", "Reach us with any privacy concerns through the contact page."),
    ],
    "terms-of-service": [
        ("title", "Terms of Service"),
        ("last_updated", "Last updated: January 2025"),
        ("acceptance_title", "1. Acceptance of Terms"),
        ("acceptance_content", "By accessing and using this website you accept and agree to be bound by these terms."),
        ("orders_title", "2. Orders and Payment"),
        ("orders_paragraph_1", "All orders are subject to availability and confirmation."),
        ("orders_paragraph_2", "Payment is required at the time of purchase. All prices are in Canadian dollars unless otherwise stated."),
        ("shipping_title", "3. Shipping and Delivery"),
        ("shipping_paragraph_1", "Shipping times are estimates and may vary."),
        ("returns_title", "4. Returns and Refunds"),
        ("returns_content", "Please refer to our Returns & Exchange policy for details about returns, exchanges and refunds."),
        ("changes_title", "5. Changes to Terms"),
        ("changes_content", "We may modify these terms at any time. Changes take effect when posted on the website."),
    ],
    "returns-exchange": [
        ("title", "Returns & Exchange"),
        ("guarantee_title", "Satisfaction Guarantee"),
        ("guarantee_content", "If you are not happy with your purchase, contact us within 14 days of delivery."),
        ("process_title", "Return Process"),
        ("process_item_1", "Contact us with your order number"),
        ("process_item_2", "Ship the item back in its original packaging"),
        ("process_item_3", "Refunds are issued to the original payment method once the item arrives"),
        ("damaged_title", "Damaged Items"),
        ("damaged_content", "Items damaged in transit are replaced or refunded in full. Please send photos within 48 hours of delivery."),
    ],
    "refund-policy": [
        ("title", "Refund Policy"),
        ("content", "Refunds are processed within 5-7 business days of receiving the returned item."),
    ],
    "cookie-policy": [
        ("title", "Cookie Policy"),
        ("last_updated", "Last updated: January 2025"),
        ("what_are_title", "What Are Cookies?"),
        ("what_are_content", "Cookies are small text files stored on your device when you visit a website."),
        ("how_use_title", "How We Use Cookies"),
        ("how_use_essential", "Essential Cookies: Required for the shopping cart and checkout"),
        ("how_use_performance", "Performance Cookies: Help us understand how visitors use the site"),
    ],
    "support": [
        ("title", "Support"),
        ("subtitle", "We're here to help"),
        ("email_title", "Email"),
        ("response_time", "We usually reply within one business day."),
    ],
}
