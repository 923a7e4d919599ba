"""Internal utilities for the Snapchat Ads client."""
