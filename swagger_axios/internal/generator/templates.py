class Templates:
    """Шаблоны для генерации файлов"""

    stub = """// @ts-ignore
import axios from '{axios_instance_path}';
{model_import}
{doc_comment}export default function ({parameters}): Promise<{response_type}> {{
  return axios.request({{
    url: `{url}`,
    method: "{method}",
    params: {params},
    data: {data}
  }}) as any;
}}
"""

    model_import = "import {{{names} }} from '{model_path}';\n"

    interface = "export interface {name} {body};"

    type_alias = "export type {name} = {body};"

    axios_instance = """/* eslint-disable */
import axios from 'axios';

let authToken = "";
export function setAuthToken(token: string) {{
  authToken = token;
}}
export function getAuthToken(): string {{
  return authToken;
}}

const instance = axios.create({{
  // @ts-ignore
  baseURL: process.env.{base_url_env} || "{base_url}",
  timeout: {timeout}
}});

instance.interceptors.request.use(
  (config) => {{
    if (authToken) {{
      config.headers.Authorization = "Bearer " + authToken;
    }}
    return config;
  }},
  // @ts-ignore
  error => Promise.reject(error),
);
{response_interceptor}
export default instance;
"""

    response_interceptor = """
instance.interceptors.response.use(
  (rs: any) => {{
    const body = rs.data || {{}};
    const error = body{error_field};
    const data = body{data_field};
    if (error) {{
      throw new Error(typeof error === 'string' ? error : JSON.stringify(error));
    }}
    return data;
  }},
  error => {{ throw error; }}
);
"""

    # tsconfig для компиляции в JavaScript (--js)
    tsconfig = {
        "compilerOptions": {
            "target": "es5",
            "module": "commonjs",
            "lib": ["es2015", "dom"],
            "declaration": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "strict": False,
        }
    }


templates = Templates()
