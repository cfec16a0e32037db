"""Infrastructure: Google Drive access and the folder cache."""
