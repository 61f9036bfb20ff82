"""MVC-style HTTP server with a welcome page and health, hello and echo endpoints."""