import json

from nodechain import WorkflowRun, create, load_settings
from nodechain.components import IfComponent, RespondToWebhookComponent, WebhookComponent
from nodechain.log import configure_logging

if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)

    email_check = {
        "steps": [
            {"component": "webhook", "input": "request", "output": "payload"},
            {"component": "if", "output": "check"},
            {
                "component": "respond200",
                "output": "response",
                "stop_when": {"kind": "present", "key": "response"},
            },
            {"component": "respond400", "output": "response"},
        ]
    }

    client = create(
        [WebhookComponent(), IfComponent(), RespondToWebhookComponent("respond200"), RespondToWebhookComponent("respond400")],
        configs={
            "if": {"value1": "${payload.query.email}", "value2": "x@y.com"},
            "respond200": {"responseCode": 200, "body": {"email": "${payload.query.email}"}, "when": "check.condition"},
            "respond400": {"responseCode": 400, "body": {"error": "Bad request - invalid email"}},
        },
        settings=settings,
    )

    for email in ("x@y.com", "someone@else.com"):
        result: WorkflowRun = client.run(email_check, inputs={"request": {"query": {"email": email}}})

        print(f"Workflow results for {email}:")
        print(json.dumps(result.to_dict(), indent=2))
        print(result.status)
