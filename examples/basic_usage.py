#!/usr/bin/env python3
"""
Basic DockerHub connector usage example.

Walks one organization page by page the way a governance platform would,
printing each team, repository and grant.

Run with: DOCKERHUB_USERNAME=... DOCKERHUB_ACCESS_TOKEN=... python examples/basic_usage.py
"""

import logging

from dockerhub_sync import ConfigurationError, DockerHubError
from dockerhub_sync.config import load_config
from dockerhub_sync.connector import DockerHubConnector, OrgSyncer, RepositorySyncer, TeamSyncer
from dockerhub_sync.logging import configure_logging

configure_logging(level=logging.INFO)

print("=== DockerHub Connector Basic Usage Example ===\n")

try:
    connector = DockerHubConnector.new(load_config())
except ConfigurationError as e:
    print(f"   Configuration problem: {e}")
    raise SystemExit(1)
except DockerHubError as e:
    print(f"   Login failed: {e}")
    raise SystemExit(1)

with connector.client:
    orgs = OrgSyncer(connector.client, connector.orgs)
    teams = TeamSyncer(connector.client)
    repos = RepositorySyncer(connector.client)

    token = ""
    while True:
        page, token = orgs.list(None, token)
        for org in page:
            print(f"Organization {org.display_name}")

            team_token = ""
            while True:
                team_page, team_token = teams.list(org.id, team_token)
                for team in team_page:
                    members, _ = teams.grants(team)
                    print(f"   Team {team.display_name}: {len(members)} member(s) on first page")
                if not team_token:
                    break

            repo_token = ""
            while True:
                repo_page, repo_token = repos.list(org.id, repo_token)
                for repo in repo_page:
                    grants, _ = repos.grants(repo)
                    for grant in grants:
                        print(f"   {grant.entitlement.id} held by team {grant.principal.resource}")
                if not repo_token:
                    break
        if not token:
            break

print("\n=== Done ===")
