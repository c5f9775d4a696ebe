"""
Root fixtures shared by every test package.
"""

import os

# IMPORTANT: Set environment variables BEFORE any imports from datacv_api
# so ApiSettings and Config are configured correctly when first loaded.
# ApiSettings requires api_secret of min 16 characters; Config.validate()
# requires a mongodb:// or mongodb+srv:// MONGODB_URI.
os.environ["ENVIRONMENT"] = "development"
os.environ["API_SECRET"] = "test-secret-key-1234"  # Min 16 chars
os.environ["ADMIN_USER_IDS"] = "admin-1"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB_NAME"] = "datacv_test"
