from flask import Flask, current_app, request, jsonify
from flask_cors import CORS
from collections import defaultdict
import time

from catalog.services.product_service import ProductService
from catalog.services.product_store import ProductStore


# Simple in-memory rate limiter
class RateLimiter:
    """Simple in-memory rate limiter (N requests per minute per IP)"""
    def __init__(self, requests_per_minute=100):
        self.requests_per_minute = requests_per_minute
        self.requests = defaultdict(list)

    def is_allowed(self, key):
        now = time.time()
        minute_ago = now - 60

        # Clean old entries; keys idle for a minute are dropped
        for other in [k for k, stamps in self.requests.items() if not stamps or stamps[-1] <= minute_ago]:
            del self.requests[other]
        recent = [t for t in self.requests.get(key, []) if t > minute_ago]

        # Check if allowed
        if len(recent) >= self.requests_per_minute:
            self.requests[key] = recent
            return False

        # Record this request
        recent.append(now)
        self.requests[key] = recent
        return True


def get_product_service() -> ProductService:
    """当前应用持有的商品服务"""
    return current_app.extensions['product_service']


def create_app(config_overrides=None):
    """创建 Flask 应用"""
    from config import Config

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # CORS: use explicit allowlist in production when provided.
    cors_origins = app.config.get('CORS_ALLOWED_ORIGINS', [])
    if cors_origins:
        CORS(app, resources={r"/api/*": {"origins": cors_origins}})
    else:
        CORS(app, resources={r"/api/*": {"origins": "*"}})

    # 每个应用实例拥有自己的内存商品集合
    if app.config.get('SEED_SAMPLE_PRODUCTS', True):
        store = ProductStore.with_sample_data()
    else:
        store = ProductStore()
    app.extensions['product_service'] = ProductService(store)

    rate_limiter = RateLimiter(requests_per_minute=app.config.get('RATE_LIMIT_PER_MINUTE', 100))

    # Rate limiting middleware
    @app.before_request
    def check_rate_limit():
        if request.path.startswith('/api/'):
            client_ip = request.headers.get('X-Forwarded-For', request.remote_addr)
            if client_ip:
                client_ip = client_ip.split(',')[0].strip()
            if not rate_limiter.is_allowed(client_ip):
                return jsonify({
                    'success': False,
                    'message': 'Rate limit exceeded. Please wait a moment.',
                    'error': 'TOO_MANY_REQUESTS'
                }), 429

    # 注册蓝图
    from catalog.routes.products import products_bp
    from catalog.routes.search import search_bp

    api_prefix = app.config.get('API_PREFIX', '/api/v1')
    app.register_blueprint(products_bp, url_prefix=f'{api_prefix}/products')
    app.register_blueprint(search_bp, url_prefix=f'{api_prefix}/search')

    return app
