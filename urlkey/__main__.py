from urlkey.app_factory import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

#############################
#
# Key design patterns used
# •	Application Factory: create_app() builds the app and dependencies.
# •	Dependency Injection (manual): the index service is passed into the blueprint factory.
# •	Service Layer: UrlIndexService combines extraction and normalization.
# •	Strategy: UrlNormalizer lets the index-key rules be swapped; UrlMatchHandler lets callers
#   decide what happens to each match and when scanning stops.
# ________________________________________
# Layout
# •	urlkey/app_factory.py: composition root (INI -> settings -> services -> blueprint)
# •	urlkey/config/: INI adapter, returns a frozen AppSettings
# •	urlkey/domain/: pure dataclasses (UrlMatch, ParsedUrl, IndexedUrl, IndexResult)
# •	urlkey/services/: URL grammar, extractor, parser, normalizer, index service
# •	urlkey/web/: JSON endpoints only, no business logic
