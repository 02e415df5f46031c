# Token authentication: dependencies for protected routes and the login/probe routes.
