"""
Seed Site Content Script
Populates the static page texts (about, privacy policy, terms, ...) in site_content
from the page content config. Existing fields are updated by (section, key).
Run with: python -m gemstore.scripts.seed_site_content [page_id ...]
"""

import sys

from gemstore.config.page_content_config import DEFAULT_PAGES
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.site_content.service import SiteContentService
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_page(service: SiteContentService, page_id: str, fields: list):
    """Seed one page"""
    created_count = 0
    updated_count = 0

    for key, value in fields:
        try:
            if service.upsert_page_field(page_id, key, value):
                created_count += 1
                logger.debug(f"Created field: {page_id}/{key}")
            else:
                updated_count += 1
                logger.debug(f"Updated field: {page_id}/{key}")
        except Exception as e:
            logger.error(f"Error processing field {page_id}/{key}: {e}")

    logger.info(f"Page {page_id} seeded: {created_count} created, {updated_count} updated")
    return created_count + updated_count


def seed_pages(supabase: Client, page_ids=None):
    """Seed the given pages, or every configured page"""
    service = SiteContentService(supabase)
    selected = page_ids or list(DEFAULT_PAGES.keys())
    total = 0
    for page_id in selected:
        if page_id not in DEFAULT_PAGES:
            logger.warning(f"No default content for page {page_id}")
            continue
        total += seed_page(service, page_id, DEFAULT_PAGES[page_id])
    return total


def main():
    """Main function to seed page content"""
    try:
        supabase = get_supabase()

        logger.info("Starting site content seeding...")
        count = seed_pages(supabase, sys.argv[1:])

        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {count} fields processed")

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
