"""Blog API - local blog authoring and browsing service."""
