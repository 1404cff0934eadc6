def normalize_user_claims(email, claims):
    return {
        "email": email,
        "firstName": claims.get("firstName"),
        "lastName": claims.get("lastName"),
        "admin": bool(claims.get("admin")),
    }
