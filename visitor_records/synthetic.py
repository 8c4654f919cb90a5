import datetime
import random

NOMBRES = [
    "Alice Martin", "Carlos Pérez", "Lucía Gómez", "Daniel Ruiz", "Sofía Torres",
    "Mateo Díaz", "Valentina Romero", "Hugo Navarro", "Elena Castro", "Pablo Ortega",
]
MOTIVOS = ["Delivery", "Reunión", "Entrevista", "Mantenimiento", "Auditoría", "Visita técnica"]
CONTACTOS = ["Bob Smith", "Marta López", "Jorge Herrera", "Ana Molina", "Recepción"]
UBICACIONES = ["Recepción", "Planta 1", "Planta 2", "Almacén", "Sala de juntas"]
TIPOS = ["guest", "contractor", "vendor", "interview"]
ESTADOS = ["pending", "active", "completed"]


def _visit_times(day: datetime.date, status: str) -> tuple[str, str]:
    # Entradas entre las 08:00 y las 16:00
    entrada = datetime.datetime.combine(day, datetime.time(random.randint(8, 15), random.randint(0, 59)))
    if status == "completed":
        salida = entrada + datetime.timedelta(minutes=random.randint(15, 180))
        return entrada.isoformat(timespec="minutes"), salida.isoformat(timespec="minutes")
    # Visita en curso o pendiente: sin salida
    return entrada.isoformat(timespec="minutes"), ""


def generate_synthetic_visitors(n: int = 25, seed: int = 777, day: datetime.date | None = None) -> list[dict]:
    """
    Genera n visitantes con el formato JSON de la API (camelCase).

    - Reparte los estados pending / active / completed de forma cíclica.
    - Aproximadamente un tercio de los registros no tiene foto.
    - Las visitas no completadas tienen timeOut vacío.
    - Los registros se reparten entre `day` y los dos días anteriores.
    """
    random.seed(seed)
    day = day or datetime.date.today()

    visitors = []
    for i in range(n):
        status = ESTADOS[i % len(ESTADOS)]
        visit_day = day - datetime.timedelta(days=random.randint(0, 2))
        time_in, time_out = _visit_times(visit_day, status)
        visitor = {
            "_id": f"v{i + 1:04d}",
            "name": random.choice(NOMBRES),
            "purpose": random.choice(MOTIVOS),
            "contactPerson": random.choice(CONTACTOS),
            "location": random.choice(UBICACIONES),
            "visitorType": random.choice(TIPOS),
            "timeIn": time_in,
            "timeOut": time_out,
            "status": status,
        }
        if random.random() > 0.33:
            visitor["photo"] = f"https://picsum.photos/seed/visitor{i + 1}/200/200"
        visitors.append(visitor)

    return visitors
