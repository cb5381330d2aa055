from .cards import build_card, excerpt, format_date, picture_url
from .client import BlogSourceError, SupabaseConfig, fetch_published_posts, load_supabase_config
from .models import BlogPost, Picture, PostCard
from .search import filter_posts
from .service import fetch_posts

__all__ = [
    "BlogPost",
    "BlogSourceError",
    "Picture",
    "PostCard",
    "SupabaseConfig",
    "build_card",
    "excerpt",
    "fetch_posts",
    "fetch_published_posts",
    "filter_posts",
    "format_date",
    "load_supabase_config",
    "picture_url",
]
