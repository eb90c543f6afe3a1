"""HTTP tests for the question, client-answer and user resources."""


# --- /api/questions ---

def test_create_and_get_question(client, make_question):
    q = make_question(correct_answer=4, time=20)
    resp = client.get(f"/api/questions/{q['id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["correctAnswer"] == 4
    assert data["time"] == 20
    assert data["answer1"] == "A"


def test_create_question_accepts_snake_case(client):
    resp = client.post("/api/questions", json={
        "question": "2 + 2?", "answer1": "3", "answer2": "4", "answer3": "5", "answer4": "22",
        "correct_answer": 2,
    })
    assert resp.status_code == 201
    assert resp.json()["correctAnswer"] == 2
    assert resp.json()["time"] is None


def test_create_question_correct_answer_out_of_range(client):
    resp = client.post("/api/questions", json={
        "question": "?", "answer1": "a", "answer2": "b", "answer3": "c", "answer4": "d",
        "correctAnswer": 5,
    })
    assert resp.status_code == 422


def test_create_question_with_id_is_rejected(client):
    resp = client.post("/api/questions", json={
        "id": 1, "question": "?", "answer1": "a", "answer2": "b", "answer3": "c", "answer4": "d",
        "correctAnswer": 1,
    })
    assert resp.status_code == 400
    assert resp.headers["X-triviaApp-error"] == "error.idexists"


def test_update_question(client, make_question):
    q = make_question()
    q["question"] = "Reworded?"
    resp = client.put("/api/questions", json=q)
    assert resp.status_code == 200
    assert resp.json()["question"] == "Reworded?"
    assert resp.headers["X-triviaApp-alert"] == "triviaApp.question.updated"


def test_list_questions(client, make_question):
    for _ in range(3):
        make_question()
    resp = client.get("/api/questions?size=2")
    assert len(resp.json()) == 2
    assert resp.headers["X-Total-Count"] == "3"


def test_delete_question_unlinks_trivia(client, make_question, make_trivia):
    q1, q2 = make_question(), make_question()
    trivia = make_trivia(question_ids=[q1["id"], q2["id"]])
    assert client.delete(f"/api/questions/{q1['id']}").status_code == 200
    remaining = client.get(f"/api/trivias/{trivia['id']}").json()["questions"]
    assert [q["id"] for q in remaining] == [q2["id"]]


def test_get_question_not_found(client):
    assert client.get("/api/questions/77").status_code == 404


# --- /api/client-answers ---

def test_record_answer(client, make_user, make_question, answer):
    user = make_user("dave")
    q = make_question()
    a = answer(user["id"], q["id"], correct=False, time=9)
    assert a["correct"] is False
    assert a["time"] == 9
    assert a["question"] == {"id": q["id"]}
    assert a["user"] == {"id": user["id"], "login": "dave"}

    resp = client.get(f"/api/client-answers/{a['id']}")
    assert resp.status_code == 200
    assert resp.json()["user"]["login"] == "dave"


def test_answer_unknown_question(client, make_user):
    user = make_user("erin")
    resp = client.post("/api/client-answers", json={
        "correct": True, "time": 3, "question": {"id": 55}, "user": {"id": user["id"]},
    })
    assert resp.status_code == 400
    assert resp.json()["errorKey"] == "questionnotfound"


def test_answer_unknown_user(client, make_question):
    q = make_question()
    resp = client.post("/api/client-answers", json={
        "correct": True, "time": 3, "question": {"id": q["id"]}, "user": {"id": 99},
    })
    assert resp.status_code == 400
    assert resp.json()["errorKey"] == "usernotfound"


def test_update_answer_without_id_creates(client, make_user, make_question):
    user = make_user("frank")
    q = make_question()
    resp = client.put("/api/client-answers", json={
        "correct": True, "time": 3, "question": {"id": q["id"]}, "user": {"id": user["id"]},
    })
    assert resp.status_code == 201


def test_delete_answer(client, make_user, make_question, answer):
    a = answer(make_user("gina")["id"], make_question()["id"])
    assert client.delete(f"/api/client-answers/{a['id']}").status_code == 200
    assert client.get(f"/api/client-answers/{a['id']}").status_code == 404
    assert client.get("/api/client-answers").headers["X-Total-Count"] == "0"


# --- /api/users ---

def test_duplicate_login_is_rejected(client, make_user):
    make_user("hank")
    resp = client.post("/api/users", json={"login": "hank"})
    assert resp.status_code == 400
    assert resp.json()["errorKey"] == "userexists"


def test_list_and_get_users(client, make_user):
    u = make_user("ivy")
    make_user("jack")
    resp = client.get("/api/users?sort=login,desc")
    assert [x["login"] for x in resp.json()] == ["jack", "ivy"]
    assert client.get(f"/api/users/{u['id']}").json()["login"] == "ivy"
    assert client.get("/api/users/999").status_code == 404
