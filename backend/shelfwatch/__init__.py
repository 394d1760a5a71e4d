"""ShelfWatch: inventory lifecycle rules for a product catalog."""
