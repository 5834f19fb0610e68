# Import C-extension-backed libraries once, up front, so that tests using
# patch.dict("sys.modules", ...) do not evict them and force a re-import
# (numpy refuses to load its extension module twice in one process).
import numpy  # noqa: F401
import pandas  # noqa: F401
import folium  # noqa: F401
import folium.plugins  # noqa: F401
