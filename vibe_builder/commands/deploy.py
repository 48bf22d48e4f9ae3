"""
Deploy Command - Deploy the application to production
"""

from typing import Any, Dict

from .base import DelegatingCommand

DEPLOYMENT_URL = "https://your-app.deployed-domain.com"


class DeployCommand(DelegatingCommand):
    name = "deploy"
    description = "Deploy your application to production"
    aliases = ("/deploy-when-ready", "/go-live", "/launch")

    agent_id = "deployment-specialist"
    task_type = "cloud-deployment"
    success_message = "Your app has been deployed successfully!"
    partial_message = "Deployment finished with problems; check the deployment result."

    def build_payload(self, user_input: str, result: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "deployment_url": DEPLOYMENT_URL,
            "features": [
                "Cloud hosting with auto-scaling",
                "SSL certificate enabled",
                "CDN for fast global access",
                "Monitoring and alerts setup",
            ],
        }
