# tests/test_payments.py
import pytest
import stripe
from fastapi.testclient import TestClient

from dojo_api.main import create_app
from dojo_api.services.payment_service import PaymentSettings, to_minor_units

from .conftest import register

API_KEY = "sk_test_123"


def test_payment_endpoints_return_503_when_unconfigured(client):
    register(client, "payer")

    calls = [
        client.post("/api/create-payment-intent", json={"amount": 25}),
        client.post("/api/create-subscription", json={"priceId": "price_123"}),
        client.get("/api/payment-methods"),
        client.get("/api/subscription"),
    ]
    for response in calls:
        assert response.status_code == 503
        assert response.json()["type"] == "PaymentsNotConfigured"


def test_payment_endpoints_require_login(client):
    assert client.get("/api/payment-methods").status_code == 401


def test_payment_settings_from_settings(settings):
    assert not PaymentSettings.from_settings(settings).is_configured
    configured = PaymentSettings.from_settings(settings.model_copy(update={"stripe_secret_key": API_KEY}))
    assert configured.is_configured
    assert configured.api_version == settings.stripe_api_version


def test_minor_units():
    assert to_minor_units(25) == 2500
    assert to_minor_units(19.99) == 1999


@pytest.fixture
def stripe_calls(monkeypatch):
    """Record every SDK call instead of reaching the network"""
    calls = []

    def recorder(name, result):
        def fake(*args, **kwargs):
            calls.append((name, args, kwargs))
            return result(*args, **kwargs) if callable(result) else result
        return fake

    monkeypatch.setattr(stripe.PaymentIntent, "create", recorder(
        "PaymentIntent.create",
        stripe.PaymentIntent.construct_from(
            {"id": "pi_1", "object": "payment_intent", "client_secret": "pi_1_secret"}, API_KEY),
    ))
    monkeypatch.setattr(stripe.Customer, "create", recorder(
        "Customer.create",
        stripe.Customer.construct_from({"id": "cus_1", "object": "customer"}, API_KEY),
    ))
    monkeypatch.setattr(stripe.Subscription, "create", recorder(
        "Subscription.create",
        stripe.Subscription.construct_from({
            "id": "sub_1",
            "object": "subscription",
            "status": "incomplete",
            "latest_invoice": {
                "id": "in_1",
                "object": "invoice",
                "payment_intent": {"id": "pi_2", "object": "payment_intent", "client_secret": "sub_1_secret"},
            },
        }, API_KEY),
    ))
    monkeypatch.setattr(stripe.Subscription, "retrieve", recorder(
        "Subscription.retrieve",
        lambda sub_id, **kwargs: stripe.Subscription.construct_from(
            {"id": sub_id, "object": "subscription", "status": "active", "latest_invoice": "in_1"}, API_KEY),
    ))
    monkeypatch.setattr(stripe.PaymentMethod, "list", recorder(
        "PaymentMethod.list",
        stripe.ListObject.construct_from({
            "object": "list",
            "data": [{
                "id": "pm_1",
                "object": "payment_method",
                "card": {"brand": "visa", "last4": "4242", "exp_month": 12, "exp_year": 2030},
            }],
        }, API_KEY),
    ))
    return calls


@pytest.fixture
def paying_client(settings):
    app = create_app(settings.model_copy(update={"stripe_secret_key": API_KEY}))
    with TestClient(app) as test_client:
        yield test_client


def test_create_payment_intent(paying_client, stripe_calls):
    user = register(paying_client, "payer")

    response = paying_client.post("/api/create-payment-intent", json={"amount": 49.5})
    assert response.status_code == 200
    assert response.json() == {"clientSecret": "pi_1_secret"}

    name, _, kwargs = stripe_calls[0]
    assert name == "PaymentIntent.create"
    assert kwargs["amount"] == 4950
    assert kwargs["currency"] == "usd"
    assert kwargs["metadata"] == {"userId": str(user["id"]), "username": "payer"}
    assert kwargs["api_key"] == "sk_test_123"


def test_amount_must_be_positive(paying_client, stripe_calls):
    register(paying_client, "payer")
    assert paying_client.post("/api/create-payment-intent", json={"amount": 0}).status_code == 400
    assert stripe_calls == []


def test_subscription_flow_reuses_customer(paying_client, stripe_calls):
    register(paying_client, "subscriber", email="subscriber@kimura-dojo.com")

    assert paying_client.get("/api/payment-methods").json() == []
    assert paying_client.get("/api/subscription").json() is None

    response = paying_client.post("/api/create-subscription", json={"priceId": "price_monthly"})
    assert response.status_code == 200
    assert response.json() == {"subscriptionId": "sub_1", "clientSecret": "sub_1_secret", "status": "incomplete"}

    paying_client.post("/api/create-subscription", json={"priceId": "price_monthly"})
    names = [name for name, _, _ in stripe_calls]
    assert names.count("Customer.create") == 1
    assert names.count("Subscription.create") == 2

    methods = paying_client.get("/api/payment-methods").json()
    assert methods == [{"id": "pm_1", "brand": "visa", "last4": "4242", "expMonth": 12, "expYear": 2030}]

    subscription = paying_client.get("/api/subscription").json()
    assert subscription["subscriptionId"] == "sub_1"
    assert subscription["status"] == "active"


def test_subscription_requires_price_id(paying_client, stripe_calls):
    register(paying_client, "subscriber")
    response = paying_client.post("/api/create-subscription", json={})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "priceId"


def test_gateway_errors_become_502(paying_client, monkeypatch):
    def declined(**kwargs):
        raise stripe.StripeError("Your card was declined.")

    monkeypatch.setattr(stripe.PaymentIntent, "create", declined)
    register(paying_client, "unlucky")

    response = paying_client.post("/api/create-payment-intent", json={"amount": 10})
    assert response.status_code == 502
    assert response.json()["type"] == "PaymentGatewayError"


def test_unexpanded_invoice_has_no_client_secret(paying_client, stripe_calls, monkeypatch):
    monkeypatch.setattr(stripe.Subscription, "create", lambda **kwargs: stripe.Subscription.construct_from(
        {"id": "sub_9", "object": "subscription", "status": "active", "latest_invoice": "in_9"}, API_KEY))
    register(paying_client, "annual")

    response = paying_client.post("/api/create-subscription", json={"priceId": "price_yearly"})
    assert response.status_code == 200
    assert response.json() == {"subscriptionId": "sub_9", "clientSecret": None, "status": "active"}
