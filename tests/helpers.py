def register(client, username, password="secret123", name=None, **fields):
    data = {"name": name or username.title(), "username": username, "password": password}
    data.update(fields)
    response = client.post("/register", data=data)
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def add_post(client, token, text="hello"):
    response = client.post("/add-post", data={"text": text}, headers=auth(token))
    assert response.status_code == 201, response.text
    return response.json()["id"]


def add_comment(client, token, post_id, comment="nice"):
    response = client.post("/add-comment", json={"postId": post_id, "comment": comment}, headers=auth(token))
    assert response.status_code == 200, response.text
    return response.json()
