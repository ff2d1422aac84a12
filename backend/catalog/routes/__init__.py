# HTTP blueprints (registered in catalog.create_app)
