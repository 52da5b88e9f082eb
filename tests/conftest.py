import pytest
import yaml


@pytest.fixture
def pet_store_swagger():
    return yaml.safe_load(
        """
swagger: "2.0"
info:
  title: Pet Store
  version: "1.0"
paths: {}
definitions:
  Category:
    type: object
    properties:
      id:
        type: integer
      name:
        type: string
  Tag:
    type: object
    x-nullable: true
    properties:
      name:
        type: string
  Pet:
    type: object
    required:
      - name
    discriminator: kind
    properties:
      kind:
        type: string
      name:
        type: string
        example: doggie
      category:
        $ref: "#/definitions/Category"
      tags:
        type: array
        items:
          $ref: "#/definitions/Tag"
      photo:
        type: file
      status:
        type: string
        enum: [available, sold]
        x-nullable: true
  Node:
    type: object
    properties:
      value:
        type: string
      children:
        type: array
        items:
          $ref: "#/definitions/Node"
"""
    )
