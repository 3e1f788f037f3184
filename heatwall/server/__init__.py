"""Web API for computing activity wall layouts."""
