"""Request routing core: qualified-name resolution and OData resource addresses."""
