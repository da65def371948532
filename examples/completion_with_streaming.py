from mistral_client import Config, MistralClient

Config.load_env()

client = MistralClient()

prompt = "def fibonacci(n: int):"
suffix = "n = int(input('Enter a number: '))\nprint(fibonacci(n))"

print(prompt)
for chunk in client.completion_stream(model="codestral-latest", prompt=prompt, suffix=suffix):
    print(chunk.choices[0].delta.content or "", end="", flush=True)
print()
print(suffix)
