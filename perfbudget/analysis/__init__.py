"""Classification and aggregation of a page's network records."""
