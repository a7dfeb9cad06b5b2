"""Post-contract real-estate transaction timeline and email drafting."""
