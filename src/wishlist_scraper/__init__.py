"""Print the item URLs of a Bandcamp fan's wishlist."""
