from .home_routes import home_bp
from .user_routes import user_bp
from .meal_routes import meal_bp
from .doctor_routes import doctor_bp
from .image_routes import image_bp
from .voice_routes import voice_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(doctor_bp)
    app.register_blueprint(image_bp)
    app.register_blueprint(voice_bp)
