import azure.functions as func

from movie_catalog_service.blueprints import actors_bp, movies_bp, ratings_bp, seeding_bp

app = func.FunctionApp()

app.register_blueprint(movies_bp)
app.register_blueprint(actors_bp)
app.register_blueprint(ratings_bp)
app.register_blueprint(seeding_bp)
