from supabase import create_client, Client
from gemstore.config import settings


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Server-side client. Uses the service_role key when set so admin writes bypass RLS."""
        if cls._client is None:
            key = settings.supabase_service_role_key or settings.supabase_key
            cls._client = create_client(settings.supabase_url, key)
        return cls._client


def get_supabase() -> Client:
    return SupabaseClient.get_client()
