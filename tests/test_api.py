from decimal import Decimal


def add_item(client, user_id, product_id, quantity):
    return client.post(f"/carts/{user_id}", json={"product_id": product_id, "quantity": quantity})


def checkout_body(user_id, cart_id, **overrides):
    body = {
        "user_id": user_id,
        "cart_id": cart_id,
        "billing_name": "Alice Smith",
        "billing_phone": "+48 600 100 200",
        "billing_address": "1 Market Street",
    }
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestUsersApi:
    def test_create_and_get_user(self, client):
        created = client.post("/users/", json={"name": "Carol", "email": "carol@example.com"})
        assert created.status_code == 201

        fetched = client.get(f"/users/{created.json()['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["email"] == "carol@example.com"

    def test_unknown_user_is_404(self, client):
        resp = client.get("/users/nope")

        assert resp.status_code == 404
        assert resp.json()["code"] == "NOT_FOUND"
        assert resp.json()["success"] is False


class TestCartsApi:
    def test_add_and_get_cart(self, client, user, product):
        resp = add_item(client, user.id, product.id, 2)

        assert resp.status_code == 200
        body = resp.json()
        assert body["user_id"] == user.id
        assert body["items"][0]["quantity"] == 2
        assert Decimal(body["items"][0]["total_price"]) == Decimal("200")

        fetched = client.get(f"/carts/{user.id}")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == body["id"]

    def test_zero_quantity_is_400(self, client, user, product):
        resp = add_item(client, user.id, product.id, 0)

        assert resp.status_code == 400
        assert resp.json()["code"] == "INVALID_ARGUMENT"

    def test_unknown_product_is_404(self, client, user):
        resp = add_item(client, user.id, "missing", 1)

        assert resp.status_code == 404

    def test_busy_lock_is_409(self, client, redis_client, user, product):
        redis_client.set.return_value = False

        resp = add_item(client, user.id, product.id, 1)

        assert resp.status_code == 409
        assert resp.json()["code"] == "CONFLICT"

    def test_remove_item(self, client, user, product):
        item_id = add_item(client, user.id, product.id, 1).json()["items"][0]["id"]

        resp = client.delete(f"/carts/{user.id}/items/{item_id}")

        assert resp.status_code == 200
        assert resp.json()["success"] is True
        assert client.get(f"/carts/{user.id}").json()["items"] == []

    def test_remove_item_of_other_user_is_404(self, client, make_user, user, product):
        item_id = add_item(client, user.id, product.id, 1).json()["items"][0]["id"]
        other = make_user("Eve")

        resp = client.delete(f"/carts/{other.id}/items/{item_id}")

        assert resp.status_code == 404
        assert len(client.get(f"/carts/{user.id}").json()["items"]) == 1

    def test_clear_cart(self, client, user, product):
        add_item(client, user.id, product.id, 3)

        resp = client.delete(f"/carts/{user.id}")

        assert resp.status_code == 200
        assert client.get(f"/carts/{user.id}").json()["items"] == []

    def test_missing_cart_is_404(self, client, user):
        assert client.get(f"/carts/{user.id}").status_code == 404


class TestOrdersApi:
    def test_checkout_flow(self, client, notifier, user, product):
        add_item(client, user.id, product.id, 2)
        cart = add_item(client, user.id, product.id, 5).json()

        resp = client.post("/orders/", json=checkout_body(user.id, cart["id"]))

        assert resp.status_code == 201
        order = resp.json()
        assert Decimal(order["order_amount"]) == Decimal("500")
        assert order["items"][0]["quantity"] == 5
        assert order["payment_status"] == "NOTPAID"
        assert order["order_status"] == "PENDING"
        assert order["delivered_date"] is None
        assert client.get(f"/carts/{user.id}").json()["items"] == []
        notifier.send_order_notification.assert_called_once()

        listed = client.get(f"/orders/users/{user.id}")
        assert [o["id"] for o in listed.json()] == [order["id"]]

    def test_empty_cart_checkout_is_400(self, client, user, product):
        cart = add_item(client, user.id, product.id, 1).json()
        client.delete(f"/carts/{user.id}")

        resp = client.post("/orders/", json=checkout_body(user.id, cart["id"]))

        assert resp.status_code == 400

    def test_missing_billing_name_is_422(self, client, user):
        resp = client.post("/orders/", json=checkout_body(user.id, "c1", billing_name=""))

        assert resp.status_code == 422

    def test_remove_order(self, client, user, product):
        cart = add_item(client, user.id, product.id, 1).json()
        order = client.post("/orders/", json=checkout_body(user.id, cart["id"])).json()

        assert client.delete(f"/orders/{order['id']}").status_code == 200
        assert client.delete(f"/orders/{order['id']}").status_code == 404

    def test_paged_listing(self, client, user, product):
        for quantity in (1, 2, 3):
            cart = add_item(client, user.id, product.id, quantity).json()
            client.post("/orders/", json=checkout_body(user.id, cart["id"]))

        resp = client.get(
            "/orders/",
            params={"page_number": 0, "page_size": 2, "sort_by": "orderAmount", "sort_dir": "desc"},
        )

        assert resp.status_code == 200
        page = resp.json()
        assert [Decimal(o["order_amount"]) for o in page["content"]] == [Decimal("300"), Decimal("200")]
        assert page["total_elements"] == 3
        assert page["total_pages"] == 2
        assert page["last_page"] is False

    def test_unknown_sort_field_is_400(self, client):
        resp = client.get("/orders/", params={"sort_by": "nope"})

        assert resp.status_code == 400
        assert resp.json()["code"] == "INVALID_ARGUMENT"

    def test_orders_of_unknown_user_is_404(self, client):
        assert client.get("/orders/users/nope").status_code == 404
