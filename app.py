from todo_backend.app import create_app, main

# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`).
app = create_app()


if __name__ == "__main__":
    # Local development only; host, port and debug come from Config.
    main()
