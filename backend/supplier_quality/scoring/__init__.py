"""Quality scoring engine: field validators, rule table and aggregator."""
