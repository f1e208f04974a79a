"""SNUC Pro Portal landing page and liveness service."""
