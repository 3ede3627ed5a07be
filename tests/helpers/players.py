FIDO = {"name": "Fido", "breed": "Lab", "status": "bench", "imageUrl": "x.png", "teamId": None}
REX = {"name": "Rex", "breed": "Boxer", "status": "field", "imageUrl": "rex.png", "teamId": 4}
