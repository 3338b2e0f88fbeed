"""Base Image Versioner - build matrix generation from Docker Hub tags."""
