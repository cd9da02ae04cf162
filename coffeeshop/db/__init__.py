from .engine import init_db, make_engine, make_session_factory, session_scope
from .utils import apply_dict_updates

__all__ = ["apply_dict_updates", "init_db", "make_engine", "make_session_factory", "session_scope"]
