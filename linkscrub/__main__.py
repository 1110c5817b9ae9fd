from linkscrub.app_factory import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

#############################
#
# Key design patterns used
# •	Application Factory: create_app() builds the app and dependencies.
# •	Dependency Injection (manual): the resolver is passed into the rule engine and the service.
# •	Service Layer: CleanService runs extract -> resolve -> clean for one request.
# •	Strategy: RedirectResolver and UrlCleaner can be swapped (tests use fakes).
# •	Rule table: DomainRuleEngine walks an ordered list of (host predicate, transform) pairs.
######################################################################
# Runtime request flow
# •	GET /          -> web.index renders index.html
# •	POST /process  -> web.process reads inputText, calls CleanService.process(...)
#                     -> result.html with the clean URL, or index.html with the error message
