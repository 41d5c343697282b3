MESSAGES = {
    "en": {
        "manager": {
            "title": "Start Call",
            "heading": "Start a new call",
            "duration": "Duration (minutes)",
            "client": "Client name",
            "model": "Model name",
            "submit": "Create room & get links",
            "room": "Room",
            "expires": "Expires at",
            "error": "ERROR",
        },
        "unauthorized": {
            "title": "Unauthorized",
            "hint": "Add ?pass=YOUR_PASS to the URL or send the X-Manager-Pass header.",
        },
    },
    "el": {
        "manager": {
            "title": "Έναρξη κλήσης",
            "heading": "Νέα κλήση",
            "duration": "Διάρκεια (λεπτά)",
            "client": "Όνομα πελάτη",
            "model": "Όνομα μοντέλου",
            "submit": "Δημιουργία δωματίου & συνδέσμων",
            "room": "Δωμάτιο",
            "expires": "Λήγει",
            "error": "ΣΦΑΛΜΑ",
        },
        "unauthorized": {
            "title": "Unauthorized",
            "hint": "Πρόσθεσε ?pass=YOUR_PASS στο URL ή X-Manager-Pass header.",
        },
    },
}


def tr(key, lang="en"):
    ## key is string like "manager.title"
    d = MESSAGES.get(lang, MESSAGES["en"])
    for part in key.split("."):
        d = d.get(part, {})
    return d if isinstance(d, str) else "???"


def section(name, lang="en"):
    ## all strings of one section, e.g. section("manager", "el")
    keys = MESSAGES["en"].get(name, {})
    return {k: tr(f"{name}.{k}", lang) for k in keys}
