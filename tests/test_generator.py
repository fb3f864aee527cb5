"""
Тесты для генератора TypeScript клиентов
"""

import copy
import os
import tempfile

import pytest

from swagger_axios import ApiClientGenerator, SwaggerAxiosConfig, generate_client
from swagger_axios.exceptions import (
    DuplicateOperationId,
    InvalidReference,
    MissingOperationId,
    UnresolvedReference,
)


def ref(name):
    return {"$ref": f"#/definitions/{name}"}


PETSTORE = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "host": "petstore.swagger.io",
    "basePath": "/v2",
    "schemes": ["https"],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "tags": ["pet-controller"],
                "parameters": [{"name": "limit", "in": "query", "type": "integer"}],
                "responses": {
                    "200": {"schema": {"type": "array", "items": ref("Pet")}}
                },
            },
            "post": {
                "operationId": "addPet",
                "tags": ["pet-controller"],
                "parameters": [
                    {"name": "pet", "in": "body", "required": True, "schema": ref("NewPet")}
                ],
                "responses": {"200": {"schema": ref("Pet")}},
            },
        },
        "/pets/{id}": {
            "get": {
                "operationId": "getPet",
                "tags": ["pet-controller", "admin"],
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": "integer"}
                ],
                "responses": {"200": {"schema": ref("Pet")}},
            }
        },
        "/store/inventory": {
            "get": {
                "operationId": "getInventory",
                "tags": ["store"],
                "responses": {
                    "200": {
                        "schema": {
                            "type": "object",
                            "additionalProperties": {"type": "integer"},
                        }
                    }
                },
            }
        },
        "/ping": {
            "get": {
                "operationId": "ping",
                "responses": {"200": {"schema": {"type": "string"}}},
            }
        },
    },
    "definitions": {
        "Pet": {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "category": ref("Category")},
        },
        "NewPet": {"type": "object", "properties": {"name": {"type": "string"}}},
        "Category": {"type": "object", "properties": {"name": {"type": "string"}}},
        "Unused": {"type": "string"},
    },
}


def petstore():
    return copy.deepcopy(PETSTORE)


def file_code(project, file_name):
    code_file = project.get_file(file_name)
    assert code_file is not None, f"{file_name} not in {project.file_names}"
    return str(code_file)


class TestApiClientGenerator:
    """Тесты основной функциональности генератора"""

    def test_project_files(self):
        """Модели, axios instance и stub по папкам тегов"""
        project = ApiClientGenerator(petstore()).generate()

        assert project.name == "Petstore"
        assert project.file_names == [
            "models.ts",
            "axiosInstance.ts",
            "pet/listPets.ts",
            "pet/addPet.ts",
            "pet/getPet.ts",
            "admin/getPet.ts",
            "store/getInventory.ts",
            "ping.ts",
        ]

    def test_models_contain_required_schemas_only(self):
        """В models.ts только достижимые из операций схемы"""
        project = generate_client(petstore())

        assert file_code(project, "models.ts") == (
            "export interface Pet {\n  id?: number;\n  category?: Category;\n};\n\n"
            "export interface Category {\n  name?: string;\n};\n\n"
            "export interface NewPet {\n  name?: string;\n};"
        )

    def test_tagged_stub_imports(self):
        """Stub в папке тега импортирует из родительской директории"""
        project = generate_client(petstore())
        code = file_code(project, "pet/addPet.ts")

        assert "import axios from '../axiosInstance';" in code
        assert "import { NewPet, Pet } from '../models';" in code
        assert "): Promise<Pet> {" in code

    def test_untagged_stub_imports(self):
        """Stub без тегов лежит в корне"""
        code = file_code(generate_client(petstore()), "ping.ts")

        assert "import axios from './axiosInstance';" in code
        assert "import {" not in code.replace("import axios", "")

    def test_stub_per_tag(self):
        """Одинаковый stub в папке каждого тега"""
        project = generate_client(petstore())

        assert file_code(project, "pet/getPet.ts") == file_code(
            project, "admin/getPet.ts"
        )

    def test_axios_instance(self):
        """Base URL берется из спецификации"""
        code = file_code(generate_client(petstore()), "axiosInstance.ts")
        assert '"https://petstore.swagger.io/v2"' in code

    def test_skip_tags(self):
        """Все stub в корне при skip_tags"""
        project = generate_client(petstore(), SwaggerAxiosConfig(skip_tags=True))

        assert project.file_names == [
            "models.ts",
            "axiosInstance.ts",
            "listPets.ts",
            "addPet.ts",
            "getPet.ts",
            "getInventory.ts",
            "ping.ts",
        ]
        assert "from './models';" in file_code(project, "getPet.ts")

    def test_empty_tags(self):
        """Пустой список тегов - stub в корне"""
        spec = petstore()
        spec["paths"]["/ping"]["get"]["tags"] = []

        assert "ping.ts" in generate_client(spec).file_names

    def test_include_exclude(self):
        """Фильтрация путей по префиксам"""
        project = generate_client(
            petstore(), SwaggerAxiosConfig(include=["/pets"], exclude=["/pets/"])
        )

        assert project.file_names == [
            "models.ts",
            "axiosInstance.ts",
            "pet/listPets.ts",
            "pet/addPet.ts",
        ]

    def test_excluded_operations_do_not_require_schemas(self):
        """Схемы исключенных операций не попадают в models.ts"""
        project = generate_client(petstore(), SwaggerAxiosConfig(include=["/ping"]))
        assert file_code(project, "models.ts") == ""

    def test_custom_axios_instance_path(self):
        """Относительный путь к своему axios instance"""
        config = SwaggerAxiosConfig(out="src/api", axios_instance_path="./src/http")
        project = generate_client(petstore(), config)

        assert "import axios from '../../http';" in file_code(project, "pet/getPet.ts")
        assert "import axios from '../http';" in file_code(project, "ping.ts")

    def test_custom_axios_instance_path_absolute_out(self, monkeypatch):
        """Абсолютный каталог вывода вне текущей директории"""
        with tempfile.TemporaryDirectory() as temp_dir:
            root = os.path.realpath(temp_dir)
            work = os.path.join(root, "work")
            os.makedirs(work)
            monkeypatch.chdir(work)

            config = SwaggerAxiosConfig(
                out=os.path.join(root, "gen", "api"), axios_instance_path="./src/http"
            )
            project = generate_client(petstore(), config)

            assert "import axios from '../../work/src/http';" in file_code(
                project, "ping.ts"
            )
            assert "import axios from '../../../work/src/http';" in file_code(
                project, "pet/getPet.ts"
            )

    def test_custom_axios_instance_path_parent_out(self, monkeypatch):
        """Каталог вывода выше текущей директории"""
        with tempfile.TemporaryDirectory() as temp_dir:
            work = os.path.join(os.path.realpath(temp_dir), "a", "work")
            os.makedirs(work)
            monkeypatch.chdir(work)

            config = SwaggerAxiosConfig(out="../gen", axios_instance_path="./src/http")
            project = generate_client(petstore(), config)

            assert "import axios from '../work/src/http';" in file_code(
                project, "ping.ts"
            )
            assert "import axios from '../../work/src/http';" in file_code(
                project, "pet/getPet.ts"
            )

    def test_custom_axios_instance_path_inside_out(self):
        """axios instance внутри каталога вывода"""
        config = SwaggerAxiosConfig(out="src/api", axios_instance_path="./src/api/http")
        project = generate_client(petstore(), config)

        assert "import axios from './http';" in file_code(project, "ping.ts")
        assert "import axios from '../http';" in file_code(project, "pet/getPet.ts")

    def test_package_axios_instance_path(self):
        """Путь без ./ не меняется"""
        config = SwaggerAxiosConfig(out="src/api", axios_instance_path="@/http")
        project = generate_client(petstore(), config)

        assert "import axios from '@/http';" in file_code(project, "pet/getPet.ts")

    def test_result_fields(self):
        """Распаковка ответа настраивается полями обертки"""
        config = SwaggerAxiosConfig(result_data_field="data", result_error_field="error")
        project = generate_client(petstore(), config)

        assert "const data = body.data;" in file_code(project, "axiosInstance.ts")

    def test_recursive_schema(self):
        """Рекурсивная схема генерируется"""
        spec = petstore()
        spec["definitions"]["Category"]["properties"]["parent"] = ref("Category")

        models = file_code(generate_client(spec), "models.ts")

        assert "  parent?: Category;" in models


class TestGeneratorErrors:
    """Тесты ошибок генерации"""

    def test_missing_operation_id(self):
        """Операция без operationId"""
        spec = petstore()
        del spec["paths"]["/ping"]["get"]["operationId"]

        with pytest.raises(MissingOperationId) as exc_info:
            generate_client(spec)

        assert exc_info.value.path == "/ping"
        assert exc_info.value.method == "get"

    def test_duplicate_operation_id(self):
        """Два stub с одним именем файла"""
        spec = petstore()
        spec["paths"]["/pets"]["post"]["operationId"] = "listPets"

        with pytest.raises(DuplicateOperationId) as exc_info:
            generate_client(spec)

        assert exc_info.value.file_name == "pet/listPets.ts"

    def test_malformed_reference(self):
        """Ссылка без #/definitions/"""
        spec = petstore()
        spec["paths"]["/ping"]["get"]["responses"]["200"]["schema"] = {"$ref": "Foo"}

        with pytest.raises(InvalidReference) as exc_info:
            generate_client(spec)

        assert exc_info.value.ref == "Foo"

    def test_unresolved_reference(self):
        """Ссылка на отсутствующую схему"""
        spec = petstore()
        del spec["definitions"]["Category"]

        with pytest.raises(UnresolvedReference) as exc_info:
            generate_client(spec)

        assert exc_info.value.ref == "#/definitions/Category"
