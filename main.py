from app import create_app

# --- WSGI entrypoint: gunicorn main:app ---
app = create_app()


# ========================== Run ==========================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config.get("PORT", 3001))
