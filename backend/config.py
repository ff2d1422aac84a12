import os
from dotenv import load_dotenv

from catalog.services.env_utils import env_flag, env_int, sanitize_env_value

load_dotenv()


class Config:
    """应用配置"""
    SECRET_KEY = sanitize_env_value(os.getenv('SECRET_KEY'), 'catalog-demo-secret-key')

    # API 配置
    API_PREFIX = '/api/v1'

    # CORS allowlist (comma-separated origins)
    # Example:
    # CORS_ALLOWED_ORIGINS=https://catalog.example.com,http://localhost:5173
    CORS_ALLOWED_ORIGINS = [
        origin.strip()
        for origin in sanitize_env_value(os.getenv('CORS_ALLOWED_ORIGINS')).split(',')
        if origin.strip()
    ]

    # Flask 环境
    FLASK_ENV = sanitize_env_value(os.getenv('FLASK_ENV'), 'development')

    # Seed the in-memory store with the five demo products on startup
    SEED_SAMPLE_PRODUCTS = env_flag(os.getenv('SEED_SAMPLE_PRODUCTS'), default=True)

    # Per-IP requests per minute on /api/*
    RATE_LIMIT_PER_MINUTE = env_int(os.getenv('RATE_LIMIT_PER_MINUTE'), default=100)
