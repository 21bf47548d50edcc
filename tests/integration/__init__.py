# Integration tests - full API through TestClient
